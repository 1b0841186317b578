from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar, overload

from layerwire.exceptions import (
    LayerwireDuplicateRegistrationError,
    LayerwireInvalidRegistrationError,
    LayerwireServiceNotFoundError,
)
from layerwire.policies import DuplicatePolicy, LockMode
from layerwire.providers import (
    ConstantProvider,
    CustomProvider,
    InterfaceProvider,
    Provider,
    ProviderFactory,
    ServiceProvider,
)
from layerwire.tokens import Identifier, ServiceRef, Token, identifier_name
from layerwire.validators import RegistrationValidator

if TYPE_CHECKING:
    from typing_extensions import Self

    from layerwire.resolvers.protocol import ResolverProtocol

T = TypeVar("T")

OverridesBuilder = Callable[["Container"], object]
"""A callable that populates a service's override container."""

logger = logging.getLogger(__name__)
_NOT_FOUND: Any = object()


class Container:
    """Register services and resolve them lazily, once per container.

    Services are keyed by a ``Token`` or by their own class/factory. The first
    ``resolve`` of an identifier produces the value and caches it; later calls
    return the cached value. Containers can inherit from any number of
    parents: local registrations are checked first, then parents in the order
    they were added, and a value produced by a parent stays cached in that
    parent.

    Examples:
        .. code-block:: python

            API_URL = Token("API_URL")


            class Client:
                def __init__(self, url: str) -> None:
                    self.url = url


            root = Container("root")
            root.add_constant(API_URL, "https://api.example.com")
            root.add_service(Client, [API_URL])

            client = root.resolve(Client)

    """

    def __init__(
        self,
        name: str = "",
        *,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT,
        lock_mode: LockMode = LockMode.THREAD,
    ) -> None:
        """Initialize an empty container.

        Args:
            name: Optional name used in error messages and logs.
            duplicate_policy: Whether registering an identifier twice raises
                (``REJECT``) or replaces the earlier provider (``REPLACE``).
            lock_mode: ``THREAD`` guarantees at-most-once production under
                concurrent first resolution; ``NONE`` skips locking.

        """
        self.name = name
        self._duplicate_policy = duplicate_policy
        self._lock_mode = lock_mode

        self._registration_validator = RegistrationValidator()
        self._providers: dict[Any, Provider[Any]] = {}
        self._cache: dict[Any, Any] = {}
        self._parents: list[Container] = []

        self._locks: dict[Any, threading.RLock] = {}
        self._locks_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Container({self.name!r})"

    @property
    def parents(self) -> tuple[Container, ...]:
        """Parent containers in lookup order."""
        return tuple(self._parents)

    # region Registration Methods
    def add_constant(self, token: Token[T], value: T) -> Self:
        """Bind a precomputed value to a token.

        Args:
            token: Token to register the value under.
            value: Value returned by every ``resolve(token)``. Falsy values
                such as ``None`` or ``0`` are cached like any other.

        Raises:
            LayerwireInvalidTokenError: If ``token`` is not a ``Token``.
            LayerwireDuplicateRegistrationError: If the token is already
                registered and the policy forbids replacing it.

        """
        self._registration_validator.validate_token(token, method_name="add_constant")
        self._add(ConstantProvider(token, value))
        return self

    def add_service(
        self,
        service: ServiceRef[T],
        dependencies: Sequence[Identifier[Any]] = (),
        overrides: OverridesBuilder | None = None,
    ) -> Self:
        """Register a class or factory that is also its own identifier.

        Args:
            service: Class or factory function building the service.
            dependencies: Identifiers resolved and passed positionally, one per
                positional parameter of ``service``.
            overrides: Optional callable receiving a fresh container. Bindings
                it adds are visible only while this service resolves its
                dependencies and take precedence over this container's.

        Raises:
            LayerwireInvalidServiceError: If ``service`` is not callable.
            LayerwireArityMismatchError: If the dependency count does not match
                the positional parameters of ``service``.
            LayerwireDuplicateRegistrationError: If ``service`` is already
                registered and the policy forbids replacing it.

        Examples:
            .. code-block:: python

                container.add_service(
                    Reporter,
                    [Logger, OUTPUT],
                    overrides=lambda local: local.add_constant(OUTPUT, "stderr"),
                )

        """
        self._registration_validator.validate_service(service, method_name="add_service")
        self._check_duplicate(service)
        local_overrides = self._build_overrides(service, overrides)
        self._add(ServiceProvider(service, dependencies, local_overrides))
        return self

    def add_interface(
        self,
        token: Token[T],
        service: ServiceRef[T],
        dependencies: Sequence[Identifier[Any]] = (),
        overrides: OverridesBuilder | None = None,
    ) -> Self:
        """Register ``service`` as the implementation behind ``token``.

        Args:
            token: Token callers depend on.
            service: Class or factory building the implementation.
            dependencies: Identifiers passed positionally to ``service``.
            overrides: Optional override container builder, see ``add_service``.

        Raises:
            LayerwireInvalidTokenError: If ``token`` is not a ``Token``.
            LayerwireInvalidServiceError: If ``service`` is not callable.
            LayerwireArityMismatchError: If the dependency count does not match.
            LayerwireDuplicateRegistrationError: If the token is already
                registered and the policy forbids replacing it.

        """
        self._registration_validator.validate_token(token, method_name="add_interface")
        self._registration_validator.validate_service(service, method_name="add_interface")
        self._check_duplicate(token)
        local_overrides = self._build_overrides(token, overrides)
        self._add(InterfaceProvider(token, service, dependencies, local_overrides))
        return self

    def add_provider(self, identifier: Identifier[T], factory: ProviderFactory[T]) -> Self:
        """Register a function that builds the value from a resolver.

        No validation is done on ``identifier`` or on what ``factory`` needs;
        whatever it returns is cached and whatever it raises propagates.
        """
        self._add(CustomProvider(identifier, factory))
        return self

    def add_parents(self, *containers: Container) -> Self:
        """Append parent containers to fall back on during resolution.

        Re-adding a parent is a no-op. Cycles are not detected: making a
        container its own ancestor leads to ``RecursionError`` on lookup.
        """
        for container in containers:
            if not isinstance(container, Container):
                msg = f"add_parents() expects Container instances, got {container!r}."
                raise LayerwireInvalidRegistrationError(msg)
            if any(parent is container for parent in self._parents):
                continue
            self._parents.append(container)
            logger.debug("Container %r now inherits from %r", self.name, container.name)
        return self

    # endregion Registration Methods

    # region Resolution Methods
    @overload
    def resolve(self, identifier: Token[T]) -> T: ...

    @overload
    def resolve(self, identifier: type[T]) -> T: ...

    @overload
    def resolve(self, identifier: Callable[..., T]) -> T: ...

    def resolve(self, identifier: Any) -> Any:
        """Return the value for ``identifier``, producing and caching it on first use.

        Raises:
            LayerwireServiceNotFoundError: If neither this container nor any
                parent can resolve ``identifier``.
            LayerwireUnresolvedDependencyError: If a dependency of the service
                being produced cannot be resolved.

        """
        value = self._lookup(identifier, resolver=self)
        if value is _NOT_FOUND:
            raise LayerwireServiceNotFoundError(
                identifier,
                container_name=self.name,
                identifier_name=identifier_name(identifier),
            )
        return value

    def has(self, identifier: Any) -> bool:
        """Return whether ``identifier`` is cached, registered, or available from a parent.

        Never produces a value and never raises for unknown identifiers.
        """
        if identifier in self._cache or identifier in self._providers:
            return True
        return any(parent.has(identifier) for parent in self._parents)

    def __contains__(self, identifier: object) -> bool:
        return self.has(identifier)

    def with_fallback(self, fallback: ResolverProtocol) -> ResolverProtocol:
        """Return a resolver that checks this container first, then ``fallback``.

        The link to ``fallback`` lives only in the returned object, so the same
        container can serve as an override scope for concurrent productions.
        """
        return _FallbackResolver(self, fallback)

    # endregion Resolution Methods

    def _lookup(self, identifier: Any, *, resolver: ResolverProtocol) -> Any:
        try:
            return self._cache[identifier]
        except KeyError:
            pass

        provider = self._providers.get(identifier)
        if provider is not None:
            return self._produce(identifier, provider, resolver)

        for parent in self._parents:
            if parent.has(identifier):
                logger.debug(
                    "Delegating %s from container %r to parent %r",
                    identifier_name(identifier),
                    self.name,
                    parent.name,
                )
                return parent.resolve(identifier)

        return _NOT_FOUND

    def _produce(self, identifier: Any, provider: Provider[Any], resolver: ResolverProtocol) -> Any:
        if self._lock_mode is LockMode.NONE:
            return self._produce_and_cache(identifier, provider, resolver)

        with self._get_lock(identifier):
            # Another thread may have produced the value while we waited.
            if identifier in self._cache:
                return self._cache[identifier]
            return self._produce_and_cache(identifier, provider, resolver)

    def _produce_and_cache(
        self,
        identifier: Any,
        provider: Provider[Any],
        resolver: ResolverProtocol,
    ) -> Any:
        logger.debug("Producing %s in container %r", identifier_name(identifier), self.name)
        value = provider.produce(resolver)
        self._cache[identifier] = value
        return value

    def _get_lock(self, identifier: Any) -> threading.RLock:
        """Get or create the production lock for ``identifier``.

        Uses double-checked locking to minimize lock contention.
        """
        lock = self._locks.get(identifier)
        if lock is None:
            with self._locks_lock:
                lock = self._locks.get(identifier)
                if lock is None:
                    lock = threading.RLock()
                    self._locks[identifier] = lock
        return lock

    def _check_duplicate(self, identifier: Any) -> None:
        if identifier not in self._providers:
            return
        if self._duplicate_policy is DuplicatePolicy.REPLACE and identifier not in self._cache:
            return
        raise LayerwireDuplicateRegistrationError(
            identifier,
            container_name=self.name,
            identifier_name=identifier_name(identifier),
        )

    def _add(self, provider: Provider[Any]) -> None:
        self._check_duplicate(provider.identifier)
        self._providers[provider.identifier] = provider
        logger.debug(
            "Registered %s for %s in container %r",
            type(provider).__name__,
            identifier_name(provider.identifier),
            self.name,
        )

    def _build_overrides(
        self,
        identifier: Any,
        overrides: OverridesBuilder | None,
    ) -> Container | None:
        if overrides is None:
            return None
        local = Container(
            f"{self.name}.{identifier_name(identifier)}" if self.name else identifier_name(identifier),
            duplicate_policy=self._duplicate_policy,
            lock_mode=self._lock_mode,
        )
        overrides(local)
        return local


class _FallbackResolver:
    """Resolve from an override container, falling back to the calling resolver."""

    def __init__(self, overrides: Container, fallback: ResolverProtocol) -> None:
        self._overrides = overrides
        self._fallback = fallback
        self.name = overrides.name

    def __repr__(self) -> str:
        return f"_FallbackResolver({self._overrides!r} -> {self._fallback!r})"

    def resolve(self, identifier: Any) -> Any:
        value = self._overrides._lookup(identifier, resolver=self)  # noqa: SLF001
        if value is _NOT_FOUND:
            return self._fallback.resolve(identifier)
        return value

    def has(self, identifier: Any) -> bool:
        return self._overrides.has(identifier) or self._fallback.has(identifier)
