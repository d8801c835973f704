"""In-memory registry mapping service identities to factories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from .errors import DuplicateRegistrationError
from .identity import ServiceIdentity

if TYPE_CHECKING:
    from .container import Container

__all__ = ["Factory", "FactoryRegistry"]

Factory = Callable[["Container"], Any]

logger = logging.getLogger(__name__)


class FactoryRegistry:
    """A registry that tracks one factory per service identity."""

    def __init__(self, *, strict: bool = False) -> None:
        self._factories: dict[ServiceIdentity[Any], Factory] = {}
        self.strict = strict

    def register(self, identity: ServiceIdentity[Any], factory: Factory) -> None:
        """Register ``factory``; the last registration for an identity wins."""

        if not callable(factory):
            raise TypeError(f"factory for {identity} must be callable")
        if identity in self._factories:
            if self.strict:
                raise DuplicateRegistrationError(f"{identity} is already registered.")
            logger.debug("overwriting factory for %s", identity)
        self._factories[identity] = factory

    def lookup(self, identity: ServiceIdentity[Any]) -> Factory | None:
        return self._factories.get(identity)

    def unregister(self, identity: ServiceIdentity[Any]) -> bool:
        return self._factories.pop(identity, None) is not None

    def identities(self) -> tuple[ServiceIdentity[Any], ...]:
        """Return all registered identities in qualified order."""

        return tuple(sorted(self._factories, key=lambda identity: identity.qualified_name))

    def display_names(self) -> tuple[str, ...]:
        """List token names, showing ``module:QualName`` when ambiguous."""

        identities = self.identities()
        counts: dict[str, int] = {}
        for identity in identities:
            name = identity.token.__qualname__
            counts[name] = counts.get(name, 0) + 1
        formatted = [
            identity.token.__qualname__
            if counts[identity.token.__qualname__] == 1
            else identity.qualified_name
            for identity in identities
        ]
        return tuple(sorted(formatted))

    def __contains__(self, identity: object) -> bool:
        return identity in self._factories

    def __len__(self) -> int:
        return len(self._factories)
