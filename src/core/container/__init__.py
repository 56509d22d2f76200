"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_db_session, get_create_seat_handler, ...

The container is organized into modules:
- infrastructure: Core services (logging, database, sessions)
- repositories: Repository factories (request-scoped)
- handlers: Validated command and query handler factories (request-scoped)
"""

from src.core.container.handlers import (
    get_create_reservation_handler,
    get_create_seat_handler,
    get_create_user_handler,
    get_delete_reservation_handler,
    get_delete_seat_handler,
    get_delete_user_handler,
    get_get_all_reservations_handler,
    get_get_all_seats_handler,
    get_get_all_users_handler,
    get_get_reservation_by_id_handler,
    get_get_seat_by_id_handler,
    get_get_seat_by_name_handler,
    get_get_user_by_email_handler,
    get_get_user_by_id_handler,
    get_list_reservations_by_date_handler,
    get_list_reservations_by_seat_handler,
    get_list_reservations_by_seat_name_handler,
    get_list_reservations_by_user_email_handler,
    get_list_reservations_by_user_handler,
    get_update_reservation_handler,
    get_update_seat_handler,
    get_update_user_handler,
)
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    init_database,
)
from src.core.container.repositories import (
    get_reservation_repository,
    get_seat_repository,
    get_user_repository,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "init_database",
    # Repositories
    "get_reservation_repository",
    "get_seat_repository",
    "get_user_repository",
    # Handlers
    "get_create_reservation_handler",
    "get_create_seat_handler",
    "get_create_user_handler",
    "get_delete_reservation_handler",
    "get_delete_seat_handler",
    "get_delete_user_handler",
    "get_get_all_reservations_handler",
    "get_get_all_seats_handler",
    "get_get_all_users_handler",
    "get_get_reservation_by_id_handler",
    "get_get_seat_by_id_handler",
    "get_get_seat_by_name_handler",
    "get_get_user_by_email_handler",
    "get_get_user_by_id_handler",
    "get_list_reservations_by_date_handler",
    "get_list_reservations_by_seat_handler",
    "get_list_reservations_by_seat_name_handler",
    "get_list_reservations_by_user_email_handler",
    "get_list_reservations_by_user_handler",
    "get_update_reservation_handler",
    "get_update_seat_handler",
    "get_update_user_handler",
]
