"""
Application layer.

Use cases, application services and the protocols the infrastructure layer
implements.
"""
