from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence
from typing import Any

from layerwire.exceptions import (
    LayerwireArityMismatchError,
    LayerwireInvalidServiceError,
    LayerwireInvalidTokenError,
)
from layerwire.tokens import identifier_name, is_token

logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class RegistrationValidator:
    """Validates identifiers and services before providers are created."""

    def validate_token(self, value: object, *, method_name: str) -> None:
        """Validate that a constant or interface key is a ``Token``."""
        if not is_token(value):
            raise LayerwireInvalidTokenError(value, method_name=method_name)

    def validate_service(self, value: object, *, method_name: str) -> None:
        """Validate that a service reference can be called to build an instance."""
        if not callable(value):
            raise LayerwireInvalidServiceError(value, method_name=method_name)

    def validate_arity(
        self,
        service: Any,
        dependencies: Sequence[Any],
        *,
        owner: str,
    ) -> None:
        """Validate that the dependency count matches the service's positional parameters.

        Services whose signature cannot be introspected (some builtins and
        extension types) are trusted to accept the declared dependencies.
        """
        arity = self.declared_arity(service)
        if arity is None:
            logger.debug(
                "Skipping arity check for %s: signature is not available",
                identifier_name(service),
            )
            return

        if arity != len(dependencies):
            raise LayerwireArityMismatchError(
                service,
                expected=arity,
                received=len(dependencies),
                owner=owner,
            )

    def declared_arity(self, service: Any) -> int | None:
        """Return the number of positional parameters ``service`` declares.

        ``*args``, ``**kwargs`` and keyword-only parameters are not counted.
        Returns ``None`` when the signature cannot be introspected.
        """
        try:
            signature = inspect.signature(service)
        except (TypeError, ValueError):
            return None

        return sum(
            1 for parameter in signature.parameters.values() if parameter.kind in _POSITIONAL_KINDS
        )
