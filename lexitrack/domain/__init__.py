"""
Domain layer.

Entities, value objects and pure domain services. Nothing here touches the
database, the clock or the network.
"""
