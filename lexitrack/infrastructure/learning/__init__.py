"""Learning context infrastructure: persistence and HTTP adapters."""
