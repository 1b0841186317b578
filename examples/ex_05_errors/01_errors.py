"""Errors: registration mistakes fail early, missing services fail on resolve."""

from __future__ import annotations

from layerwire import (
    Container,
    LayerwireArityMismatchError,
    LayerwireDuplicateRegistrationError,
    LayerwireServiceNotFoundError,
    LayerwireUnresolvedDependencyError,
    Token,
)

TIMEOUT: Token[float] = Token("TIMEOUT")


class Client:
    def __init__(self, url: str, timeout: float) -> None:
        self.url = url
        self.timeout = timeout


class Poller:
    def __init__(self, timeout: float) -> None:
        self.timeout = timeout


def main() -> None:
    container = Container("app")

    try:
        container.add_service(Client, [TIMEOUT])
    except LayerwireArityMismatchError as error:
        print(f"arity: expected={error.expected} received={error.received}")  # => arity: expected=2 received=1

    container.add_constant(TIMEOUT, 1.5)
    try:
        container.add_constant(TIMEOUT, 3.0)
    except LayerwireDuplicateRegistrationError as error:
        print(type(error).__name__)  # => LayerwireDuplicateRegistrationError

    try:
        container.resolve(Client)
    except LayerwireServiceNotFoundError as error:
        print(error)  # => Service 'Client' cannot be resolved from container 'app'.

    orphan = Container("orphan").add_service(Poller, [TIMEOUT])
    try:
        orphan.resolve(Poller)
    except LayerwireUnresolvedDependencyError as error:
        print(error)  # => Dependency 'TIMEOUT' cannot be resolved for service 'Poller' from container 'orphan'.


if __name__ == "__main__":
    main()
