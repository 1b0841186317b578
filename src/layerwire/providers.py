from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeAlias, TypeVar

from layerwire.exceptions import LayerwireUnresolvedDependencyError
from layerwire.tokens import Identifier, ServiceRef, Token, identifier_name
from layerwire.validators import RegistrationValidator

if TYPE_CHECKING:
    from layerwire.container import Container
    from layerwire.resolvers.protocol import ResolverProtocol

T = TypeVar("T")

ProviderFactory: TypeAlias = Callable[["ResolverProtocol"], T]
"""A function that builds a value from the resolver it is given."""

logger = logging.getLogger(__name__)
_validator = RegistrationValidator()


class Provider(ABC, Generic[T]):
    """Produce the value bound to one identifier."""

    identifier: Identifier[T]
    """The key this provider is registered under."""

    @abstractmethod
    def produce(self, resolver: ResolverProtocol) -> T:
        """Build the value, resolving dependencies from ``resolver``."""


class ConstantProvider(Provider[T]):
    """Return a value that was computed before registration."""

    def __init__(self, identifier: Token[T], value: T) -> None:
        _validator.validate_token(identifier, method_name="ConstantProvider")
        self.identifier = identifier
        self.value = value

    def produce(self, resolver: ResolverProtocol) -> T:
        return self.value


class ServiceProvider(Provider[T]):
    """Construct a service keyed by its own class or factory.

    Dependencies are resolved in declared order and passed positionally. When
    ``overrides`` is given, dependencies are looked up there first and fall
    through to the resolver handed to ``produce``.
    """

    def __init__(
        self,
        service: ServiceRef[T],
        dependencies: Sequence[Identifier[Any]] = (),
        overrides: Container | None = None,
    ) -> None:
        _validator.validate_service(service, method_name=type(self).__name__)
        self.identifier = service
        self.service = service
        self.dependencies: tuple[Identifier[Any], ...] = tuple(dependencies)
        self.overrides = overrides
        _validator.validate_arity(
            service,
            self.dependencies,
            owner=f"service '{identifier_name(service)}'",
        )

    def produce(self, resolver: ResolverProtocol) -> T:
        effective_resolver = self._effective_resolver(resolver)
        arguments = [
            self._resolve_dependency(effective_resolver, dependency)
            for dependency in self.dependencies
        ]
        logger.debug(
            "Constructing %s with %d dependencies",
            identifier_name(self.identifier),
            len(arguments),
        )
        return self.service(*arguments)

    def _effective_resolver(self, resolver: ResolverProtocol) -> ResolverProtocol:
        if self.overrides is None:
            return resolver
        return self.overrides.with_fallback(resolver)

    def _resolve_dependency(self, resolver: ResolverProtocol, dependency: Identifier[Any]) -> Any:
        if not resolver.has(dependency):
            raise LayerwireUnresolvedDependencyError(
                dependency,
                service=self.identifier,
                dependency_name=identifier_name(dependency),
                service_name=identifier_name(self.identifier),
                resolver_name=resolver.name,
            )
        return resolver.resolve(dependency)


class InterfaceProvider(ServiceProvider[T]):
    """Construct a service registered under a ``Token`` instead of its own class.

    Several implementations can be bound to the same token in different
    containers; callers only ever depend on the token.
    """

    def __init__(
        self,
        token: Token[T],
        service: ServiceRef[T],
        dependencies: Sequence[Identifier[Any]] = (),
        overrides: Container | None = None,
    ) -> None:
        _validator.validate_token(token, method_name="InterfaceProvider")
        _validator.validate_service(service, method_name="InterfaceProvider")
        self.identifier = token
        self.service = service
        self.dependencies = tuple(dependencies)
        self.overrides = overrides
        _validator.validate_arity(
            service,
            self.dependencies,
            owner=f"interface '{identifier_name(token)}'",
        )


class CustomProvider(Provider[T]):
    """Delegate production to an arbitrary function of the resolver."""

    def __init__(self, identifier: Identifier[T], factory: ProviderFactory[T]) -> None:
        self.identifier = identifier
        self.factory = factory

    def produce(self, resolver: ResolverProtocol) -> T:
        return self.factory(resolver)
