"""
Infrastructure layer.

Implementations of the ports defined in the application layer:

- Persistence (SQLAlchemy repositories and mappers)
- Web framework (FastAPI routers and schemas)
- System clock and random source

This layer depends on domain and application layers,
but they do not depend on it.
"""
