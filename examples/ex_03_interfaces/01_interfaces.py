"""Interfaces: bind a token to one of several implementations per container."""

from __future__ import annotations

from typing import Protocol

from layerwire import Container, Token


class Storage(Protocol):
    def save(self, key: str) -> str: ...


class MemoryStorage:
    def save(self, key: str) -> str:
        return f"memory:{key}"


class DiskStorage:
    def __init__(self, root: str) -> None:
        self.root = root

    def save(self, key: str) -> str:
        return f"disk:{self.root}/{key}"


STORAGE: Token[Storage] = Token("STORAGE")
DATA_ROOT: Token[str] = Token("DATA_ROOT")


def main() -> None:
    tests = Container("tests").add_interface(STORAGE, MemoryStorage)

    app = Container("app")
    app.add_constant(DATA_ROOT, "/var/data")
    app.add_interface(STORAGE, DiskStorage, [DATA_ROOT])

    print(tests.resolve(STORAGE).save("report"))  # => memory:report
    print(app.resolve(STORAGE).save("report"))  # => disk:/var/data/report


if __name__ == "__main__":
    main()
