"""Unit tests for service identities."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import pytest

from dic_core import ServiceIdentity, identity_for


@runtime_checkable
class _Greeter(Protocol):
    def greet(self) -> str: ...


class _StaticGreeter(Protocol):
    def greet(self) -> str: ...


class _English:
    def greet(self) -> str:
        return "hello"


def test_identical_tokens_produce_equal_identities() -> None:
    first = identity_for(_Greeter)
    second = identity_for(_Greeter)

    assert first == second
    assert hash(first) == hash(second)
    assert identity_for(first) is first


def test_same_named_classes_do_not_collide() -> None:
    widget_a = type("Widget", (), {"__module__": "plugins.alpha"})
    widget_b = type("Widget", (), {"__module__": "plugins.beta"})

    assert identity_for(widget_a) != identity_for(widget_b)
    assert identity_for(widget_a).qualified_name == "plugins.alpha:Widget"
    assert str(identity_for(widget_b)) == "plugins.beta:Widget"


def test_non_class_token_is_rejected() -> None:
    with pytest.raises(TypeError):
        identity_for("ServiceOne")  # type: ignore[arg-type]


def test_static_protocol_token_is_rejected() -> None:
    with pytest.raises(TypeError, match="runtime_checkable"):
        ServiceIdentity(_StaticGreeter)


def test_accepts_runs_capability_check() -> None:
    identity = identity_for(_Greeter)

    assert identity.accepts(_English())
    assert not identity.accepts(object())
