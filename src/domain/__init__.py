"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects, error
catalogs, protocols (ports) and domain services. The domain layer has NO
dependencies on any framework or infrastructure; pydantic appears only as
metadata on the Annotated request types.

Structure:
- value_objects/: Value objects (immutable, no identity)
- entities/: Domain entities (mutable, have identity)
- errors/: Error catalogs (Error constants and factories per area)
- services/: Rules spanning several entities (seat availability)
- protocols/: Domain protocols (repository and logger interfaces)
- types.py / validators/: Annotated request field types

The domain layer defines WHAT the business does, not HOW it's implemented.
"""
