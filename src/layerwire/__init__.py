from layerwire.container import Container
from layerwire.exceptions import (
    LayerwireArityMismatchError,
    LayerwireDuplicateRegistrationError,
    LayerwireError,
    LayerwireInvalidRegistrationError,
    LayerwireInvalidServiceError,
    LayerwireInvalidTokenError,
    LayerwireServiceNotFoundError,
    LayerwireUnresolvedDependencyError,
)
from layerwire.policies import DuplicatePolicy, LockMode
from layerwire.providers import (
    ConstantProvider,
    CustomProvider,
    InterfaceProvider,
    Provider,
    ServiceProvider,
)
from layerwire.resolvers.protocol import ResolverProtocol
from layerwire.tokens import Identifier, ServiceRef, Token

__all__ = [
    "ConstantProvider",
    "Container",
    "CustomProvider",
    "DuplicatePolicy",
    "Identifier",
    "InterfaceProvider",
    "LayerwireArityMismatchError",
    "LayerwireDuplicateRegistrationError",
    "LayerwireError",
    "LayerwireInvalidRegistrationError",
    "LayerwireInvalidServiceError",
    "LayerwireInvalidTokenError",
    "LayerwireServiceNotFoundError",
    "LayerwireUnresolvedDependencyError",
    "LockMode",
    "Provider",
    "ResolverProtocol",
    "ServiceProvider",
    "ServiceRef",
    "Token",
]
