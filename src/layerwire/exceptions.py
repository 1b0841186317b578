from __future__ import annotations

from typing import Any


class LayerwireError(Exception):
    """Represent a base class for all layerwire-specific failures.

    Catch this type when you want to handle any layerwire error path without
    matching each concrete exception class individually.
    """


class LayerwireInvalidRegistrationError(LayerwireError):
    """Signal invalid registration configuration.

    Raised by registration APIs such as ``Container.add_constant``,
    ``Container.add_service``, ``Container.add_interface`` and
    ``Container.add_parents`` when arguments are invalid. Concrete subclasses
    narrow down the reason.
    """


class LayerwireInvalidTokenError(LayerwireInvalidRegistrationError):
    """Signal that a ``Token`` was required but something else was given.

    Raised by ``Container.add_constant`` and ``Container.add_interface``.
    Constants and interfaces are always keyed by an explicit ``Token``; classes
    and functions are only valid keys for ``add_service``.
    """

    def __init__(self, value: Any, *, method_name: str) -> None:
        self.value = value
        self.method_name = method_name
        super().__init__(
            f"{method_name}() parameter 'token' must be a Token instance, got {value!r}.",
        )


class LayerwireInvalidServiceError(LayerwireInvalidRegistrationError):
    """Signal that a service reference is not callable.

    Raised by ``Container.add_service``, ``Container.add_interface`` and the
    service provider constructors. Pass a class or a factory function.
    """

    def __init__(self, value: Any, *, method_name: str) -> None:
        self.value = value
        self.method_name = method_name
        super().__init__(
            f"{method_name}() parameter 'service' must be a class or callable, got {value!r}.",
        )


class LayerwireArityMismatchError(LayerwireInvalidRegistrationError):
    """Signal that declared dependencies do not match the service signature.

    Raised at registration time, before any resolution happens. The number of
    dependency identifiers must equal the number of positional parameters the
    service declares.

    Typical fixes include adding the missing dependency identifiers or
    removing extra ones so the list lines up with the constructor.
    """

    def __init__(self, service: Any, *, expected: int, received: int, owner: str) -> None:
        self.service = service
        self.expected = expected
        self.received = received
        super().__init__(
            f"Expected {expected} dependencies for {owner} but received {received}.",
        )


class LayerwireDuplicateRegistrationError(LayerwireInvalidRegistrationError):
    """Signal that an identifier already has a provider in this container.

    Raised by every ``add_*`` registration method when the container uses
    ``DuplicatePolicy.REJECT`` (the default). Containers created with
    ``DuplicatePolicy.REPLACE`` overwrite providers instead, but still refuse
    to replace an identifier whose value has already been produced.
    """

    def __init__(self, identifier: Any, *, container_name: str, identifier_name: str) -> None:
        self.identifier = identifier
        self.container_name = container_name
        super().__init__(
            f"Service '{identifier_name}' is already registered in container "
            f"'{container_name}'.",
        )


class LayerwireUnresolvedDependencyError(LayerwireError):
    """Signal that a dependency of a service cannot be resolved.

    Raised while producing a service when one of its declared dependencies has
    no cached value or provider anywhere in the resolver chain. The service is
    not constructed and nothing is cached for it.

    Typical fixes include registering the dependency on the container, on one
    of its parents, or in the service's override scope.
    """

    def __init__(
        self,
        dependency: Any,
        *,
        service: Any,
        dependency_name: str,
        service_name: str,
        resolver_name: str,
    ) -> None:
        self.dependency = dependency
        self.service = service
        super().__init__(
            f"Dependency '{dependency_name}' cannot be resolved for service "
            f"'{service_name}' from container '{resolver_name}'.",
        )


class LayerwireServiceNotFoundError(LayerwireError):
    """Signal that ``Container.resolve`` found nothing for an identifier.

    The identifier has no cached value and no provider in the container, and
    none of its parents can resolve it. Use ``Container.has`` to test for
    presence without raising.
    """

    def __init__(self, identifier: Any, *, container_name: str, identifier_name: str) -> None:
        self.identifier = identifier
        self.container_name = container_name
        super().__init__(
            f"Service '{identifier_name}' cannot be resolved from container '{container_name}'.",
        )
