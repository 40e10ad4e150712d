"""
Learning bounded context - Application layer.

Use cases orchestrate the learning engine: they read snapshots through
repository protocols, run the pure domain services and write the results
back.
"""
