"""
Infrastructure Package
======================

Provides abstraction layers for external dependencies.

Modules:
    - events: Domain event bus (Redis pub/sub, disabled)
    - container: Lazily built, cached service instances

This package enables:
    - Easy testing with the disabled event bus
    - Loose coupling between business logic and infrastructure
"""
