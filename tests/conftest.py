"""Shared pytest fixtures for layerwire tests."""

import pytest

from layerwire import Container, DuplicatePolicy, LockMode


@pytest.fixture()
def container() -> Container:
    """Default container: duplicates rejected, thread locks enabled."""
    return Container("root")


@pytest.fixture()
def replacing_container() -> Container:
    """Container where the last registration wins."""
    return Container("replacing", duplicate_policy=DuplicatePolicy.REPLACE)


@pytest.fixture()
def unlocked_container() -> Container:
    """Container with locking disabled."""
    return Container("unlocked", lock_mode=LockMode.NONE)
