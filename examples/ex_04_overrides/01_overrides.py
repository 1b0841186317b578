"""Override containers: change one dependency for a single service."""

from __future__ import annotations

from layerwire import Container, Token

OUTPUT: Token[str] = Token("OUTPUT")


class AuditLog:
    def __init__(self, output: str) -> None:
        self.output = output


class AccessLog:
    def __init__(self, output: str) -> None:
        self.output = output


def main() -> None:
    container = Container("app")
    container.add_constant(OUTPUT, "stdout")
    container.add_service(
        AuditLog,
        [OUTPUT],
        overrides=lambda local: local.add_constant(OUTPUT, "/var/log/audit.log"),
    )
    container.add_service(AccessLog, [OUTPUT])

    print(f"audit={container.resolve(AuditLog).output}")  # => audit=/var/log/audit.log
    print(f"access={container.resolve(AccessLog).output}")  # => access=stdout


if __name__ == "__main__":
    main()
