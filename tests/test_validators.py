from __future__ import annotations

import pytest

from layerwire.exceptions import (
    LayerwireArityMismatchError,
    LayerwireInvalidServiceError,
    LayerwireInvalidTokenError,
)
from layerwire.tokens import Token
from layerwire.validators import RegistrationValidator


@pytest.fixture()
def validator() -> RegistrationValidator:
    return RegistrationValidator()


class TwoArgs:
    def __init__(self, first: int, second: int) -> None:
        self.first = first
        self.second = second


def test_validate_token_accepts_token(validator: RegistrationValidator) -> None:
    validator.validate_token(Token("URL"), method_name="add_constant")


def test_validate_token_rejects_class(validator: RegistrationValidator) -> None:
    with pytest.raises(LayerwireInvalidTokenError) as exc_info:
        validator.validate_token(TwoArgs, method_name="add_constant")

    assert exc_info.value.value is TwoArgs
    assert "add_constant() parameter 'token'" in str(exc_info.value)


def test_validate_service_rejects_non_callable(validator: RegistrationValidator) -> None:
    with pytest.raises(LayerwireInvalidServiceError) as exc_info:
        validator.validate_service("not callable", method_name="add_service")

    assert exc_info.value.value == "not callable"


def test_validate_service_accepts_function(validator: RegistrationValidator) -> None:
    validator.validate_service(lambda: None, method_name="add_service")


@pytest.mark.parametrize(
    ("service", "expected"),
    [
        (TwoArgs, 2),
        (lambda: None, 0),
        (lambda a, b, c: None, 3),
        (lambda a, b=1: None, 2),
        (lambda a, /, b: None, 2),
        (lambda a, *args, **kwargs: None, 1),
        (lambda a, *, b: None, 1),
    ],
)
def test_declared_arity_counts_positional_parameters(
    validator: RegistrationValidator,
    service: object,
    expected: int,
) -> None:
    assert validator.declared_arity(service) == expected


def test_declared_arity_ignores_self_on_classes(validator: RegistrationValidator) -> None:
    class NoInit:
        pass

    assert validator.declared_arity(NoInit) == 0


def test_declared_arity_is_none_when_signature_is_unavailable(
    validator: RegistrationValidator,
) -> None:
    def opaque() -> None:
        return None

    opaque.__signature__ = "not a signature"  # type: ignore[attr-defined]

    assert validator.declared_arity(opaque) is None


def test_validate_arity_passes_on_match(validator: RegistrationValidator) -> None:
    validator.validate_arity(TwoArgs, [Token(), Token()], owner="service 'TwoArgs'")


@pytest.mark.parametrize("count", [0, 1, 3])
def test_validate_arity_raises_on_mismatch(validator: RegistrationValidator, count: int) -> None:
    dependencies = [Token() for _ in range(count)]

    with pytest.raises(LayerwireArityMismatchError) as exc_info:
        validator.validate_arity(TwoArgs, dependencies, owner="service 'TwoArgs'")

    assert exc_info.value.expected == 2
    assert exc_info.value.received == count
    assert exc_info.value.service is TwoArgs
