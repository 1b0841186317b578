from __future__ import annotations

from layerwire.tokens import Token, identifier_name, is_token


def test_tokens_with_same_name_are_distinct() -> None:
    first = Token("URL")
    second = Token("URL")

    assert first is not second
    assert first != second
    assert len({first, second}) == 2


def test_token_is_equal_to_itself() -> None:
    token = Token("URL")

    assert token == token
    assert {token: 1}[token] == 1


def test_token_defaults_to_empty_name() -> None:
    assert Token().name == ""


def test_token_repr_shows_name() -> None:
    assert repr(Token("URL")) == "Token('URL')"


def test_is_token() -> None:
    class Service:
        pass

    assert is_token(Token())
    assert not is_token(Service)
    assert not is_token("URL")


def test_identifier_name_for_named_token() -> None:
    assert identifier_name(Token("URL")) == "URL"


def test_identifier_name_for_unnamed_token_falls_back_to_repr() -> None:
    assert identifier_name(Token()) == "Token('')"


def test_identifier_name_for_class_uses_qualname() -> None:
    class Service:
        pass

    assert identifier_name(Service) == "test_identifier_name_for_class_uses_qualname.<locals>.Service"


def test_identifier_name_for_object_without_qualname_uses_repr() -> None:
    assert identifier_name(42) == "42"
