"""Unit tests for the factory registry."""

from __future__ import annotations

import logging

import pytest

from dic_core import DuplicateRegistrationError, FactoryRegistry, identity_for


class _Alpha:
    pass


class _Beta:
    pass


def test_lookup_returns_registered_factory_without_calling_it() -> None:
    registry = FactoryRegistry()
    calls: list[object] = []

    def factory(container):
        calls.append(container)
        return _Alpha()

    registry.register(identity_for(_Alpha), factory)

    assert registry.lookup(identity_for(_Alpha)) is factory
    assert calls == []


def test_lookup_missing_identity_returns_none() -> None:
    assert FactoryRegistry().lookup(identity_for(_Alpha)) is None


def test_last_registration_wins(caplog: pytest.LogCaptureFixture) -> None:
    registry = FactoryRegistry()
    first = lambda _: _Alpha()  # noqa: E731
    second = lambda _: _Alpha()  # noqa: E731

    registry.register(identity_for(_Alpha), first)
    with caplog.at_level(logging.DEBUG, logger="dic_core.registry"):
        registry.register(identity_for(_Alpha), second)

    assert registry.lookup(identity_for(_Alpha)) is second
    assert len(registry) == 1
    assert "overwriting factory" in caplog.text


def test_strict_registry_rejects_duplicates() -> None:
    registry = FactoryRegistry(strict=True)
    registry.register(identity_for(_Alpha), lambda _: _Alpha())

    with pytest.raises(DuplicateRegistrationError):
        registry.register(identity_for(_Alpha), lambda _: _Alpha())


def test_non_callable_factory_is_rejected() -> None:
    with pytest.raises(TypeError):
        FactoryRegistry().register(identity_for(_Alpha), "not a factory")  # type: ignore[arg-type]


def test_unregister_and_membership() -> None:
    registry = FactoryRegistry()
    registry.register(identity_for(_Alpha), lambda _: _Alpha())

    assert identity_for(_Alpha) in registry
    assert registry.unregister(identity_for(_Alpha)) is True
    assert identity_for(_Alpha) not in registry
    assert registry.unregister(identity_for(_Alpha)) is False


def test_identities_and_display_names_are_sorted() -> None:
    registry = FactoryRegistry()
    registry.register(identity_for(_Beta), lambda _: _Beta())
    registry.register(identity_for(_Alpha), lambda _: _Alpha())

    assert [identity.token for identity in registry.identities()] == [_Alpha, _Beta]
    assert registry.display_names() == ("_Alpha", "_Beta")


def test_display_names_qualify_ambiguous_tokens() -> None:
    registry = FactoryRegistry()
    widget_a = type("Widget", (), {"__module__": "plugins.alpha"})
    widget_b = type("Widget", (), {"__module__": "plugins.beta"})
    registry.register(identity_for(widget_a), lambda _: widget_a())
    registry.register(identity_for(widget_b), lambda _: widget_b())
    registry.register(identity_for(_Alpha), lambda _: _Alpha())

    assert registry.display_names() == (
        "_Alpha",
        "plugins.alpha:Widget",
        "plugins.beta:Widget",
    )
