"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state
- Queries: Read operations that fetch data
- Validation: Input filter + request validators run before any handler

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- dtos/: Response dataclasses returned inside Success
- filters.py: Input normalisation (trim, case) applied to every request
- validation/: Request validators and the validation pipeline

The application layer orchestrates domain logic but contains no business rules.
"""
