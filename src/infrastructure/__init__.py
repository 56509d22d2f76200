"""Infrastructure layer - Adapters.

This layer contains implementations of domain protocols (ports):
- SQLAlchemy async persistence with unique indexes (repositories)
- Structured console logging (structlog)

Structure:
- persistence/: Database, models, mappers and repository adapters
- logging/: LoggerProtocol adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
