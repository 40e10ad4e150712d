"""lexitrack: learning progress and assessment engine for vocabulary study."""
