"""Parent containers: children fall back to parents, local bindings win."""

from __future__ import annotations

from layerwire import Container, Token

URL: Token[str] = Token("URL")


class Database:
    pass


def main() -> None:
    root = Container("root")
    root.add_constant(URL, "http://a/")
    root.add_service(Database)

    staging = Container("staging").add_parents(root)
    staging.add_constant(URL, "http://b/")

    production = Container("production").add_parents(root)

    print(f"staging_url={staging.resolve(URL)}")  # => staging_url=http://b/
    print(f"production_url={production.resolve(URL)}")  # => production_url=http://a/

    shared = staging.resolve(Database) is production.resolve(Database)
    print(f"shared_database={shared}")  # => shared_database=True


if __name__ == "__main__":
    main()
