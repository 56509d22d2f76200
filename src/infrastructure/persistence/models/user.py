"""User database model.

Emails are unique regardless of case: the unique index is built on
``lower(email)``, so ``Ana@Example.com`` and ``ana@example.com`` collide.
"""

from sqlalchemy import Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel

EMAIL_INDEX = "ix_users_email"


class UserModel(BaseMutableModel):
    """User row.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        first_name: First name as validated by the domain
        last_name: Last name as validated by the domain
        email: Email address (unique, case-insensitive)
        password: Password as held by the domain ``Password`` value object

    Indexes:
        - ix_users_email: unique on lower(email)
    """

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    password: Mapped[str] = mapped_column(String(100), nullable=False)


Index(EMAIL_INDEX, func.lower(UserModel.email), unique=True)
