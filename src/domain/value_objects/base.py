"""Shared plumbing for value objects.

Value objects are frozen, slotted dataclasses that can only be built by
their own ``create`` (or ``of``) factory. Factories pass ``FACTORY_KEY``
as an init-only argument; any other construction path raises TypeError so
an unvalidated instance can never exist.
"""

from typing import Any

FACTORY_KEY = object()
"""Token accepted by value-object and entity constructors."""


def ensure_factory(key: object, cls: type) -> None:
    """Reject construction that bypassed the factory.

    Raises:
        TypeError: If ``key`` is not ``FACTORY_KEY``.
    """
    if key is not FACTORY_KEY:
        raise TypeError(
            f"{cls.__name__} cannot be instantiated directly; "
            f"use {cls.__name__}.create()"
        )


class ValueObject:
    """Mixin giving value objects their string form.

    ``str(vo)`` is the wrapped value; subclasses holding secrets override it.
    """

    __slots__ = ()

    value: Any

    def __str__(self) -> str:
        return str(self.value)


def unwrap(value_object: ValueObject) -> Any:
    """Explicit conversion of a value object to its primitive value.

    Example:
        >>> unwrap(Email.create("user@example.com").value)
        'user@example.com'
    """
    return value_object.value
