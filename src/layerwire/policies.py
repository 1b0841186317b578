from __future__ import annotations

from enum import Enum


class DuplicatePolicy(Enum):
    """Select what happens when an identifier is registered twice on a container."""

    REJECT = "reject"
    """Raise ``LayerwireDuplicateRegistrationError`` on the second registration."""

    REPLACE = "replace"
    """Let the last registration win, as long as no value was produced yet."""


class LockMode(Enum):
    """Select locking behavior for first-time service production.

    Containers default to ``THREAD`` so a service is built at most once even
    when several threads resolve it concurrently for the first time.
    """

    THREAD = "thread"
    """Guard production with a per-identifier ``threading.RLock``."""

    NONE = "none"
    """Disable locking. Only safe when a single thread resolves services."""
