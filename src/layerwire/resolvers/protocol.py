from __future__ import annotations

from typing import Any, Protocol, TypeVar, overload

from layerwire.tokens import Token

T = TypeVar("T")


class ResolverProtocol(Protocol):
    """Protocol for the object a provider resolves its dependencies from."""

    name: str

    @overload
    def resolve(self, identifier: Token[T]) -> T: ...

    @overload
    def resolve(self, identifier: type[T]) -> T: ...

    @overload
    def resolve(self, identifier: Any) -> Any: ...

    def resolve(self, identifier: Any) -> Any:
        """Resolve the given identifier and return its instance.

        Args:
            identifier: Token or service reference to resolve.

        """

    def has(self, identifier: Any) -> bool:
        """Return whether the identifier can be resolved, without producing it.

        Args:
            identifier: Token or service reference to look up.

        """
