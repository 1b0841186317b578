"""Quickstart: register a constant and two services, then resolve them.

Services are built on first ``resolve`` and cached for the container's
lifetime, so every consumer shares the same instance.
"""

from __future__ import annotations

from layerwire import Container, Token

API_URL: Token[str] = Token("API_URL")


class Logger:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def log(self, line: str) -> None:
        self.lines.append(line)


class ApiClient:
    def __init__(self, url: str, logger: Logger) -> None:
        self.url = url
        self.logger = logger


def main() -> None:
    container = Container("app")
    container.add_constant(API_URL, "https://api.example.com/")
    container.add_service(Logger)
    container.add_service(ApiClient, [API_URL, Logger])

    client = container.resolve(ApiClient)
    client.logger.log("ready")

    print(f"url={client.url}")  # => url=https://api.example.com/
    print(f"same_client={client is container.resolve(ApiClient)}")  # => same_client=True
    print(f"shared_logger={client.logger is container.resolve(Logger)}")  # => shared_logger=True
    print(f"has_logger={container.has(Logger)}")  # => has_logger=True


if __name__ == "__main__":
    main()
