from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeAlias, TypeVar

T = TypeVar("T")

ServiceRef: TypeAlias = Callable[..., T]
"""A class or factory used both as a service identifier and to build the service."""


class Token(Generic[T]):
    """Name a service that is not identified by its own constructor.

    Tokens compare by identity: two tokens created with the same name are two
    different identifiers. The name only shows up in ``repr`` and in error
    messages.

    Examples:
        .. code-block:: python

            API_URL: Token[str] = Token("API_URL")

            container.add_constant(API_URL, "https://api.example.com")

    """

    __slots__ = ("name",)

    def __init__(self, name: str = "") -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Token({self.name!r})"


Identifier: TypeAlias = Token[T] | ServiceRef[T]
"""Anything a container accepts as a service key."""


def is_token(value: object) -> bool:
    return isinstance(value, Token)


def identifier_name(identifier: Any) -> str:
    """Return a human-readable name for an identifier."""
    if isinstance(identifier, Token):
        return identifier.name or repr(identifier)
    return getattr(identifier, "__qualname__", None) or repr(identifier)
