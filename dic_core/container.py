"""Service container that builds a fresh instance on every request."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar, Union, overload

from .configurable import Configurable, configuration_type_of, supports_configuration
from .errors import (
    ConfigurationMismatchError,
    NotConfigurableError,
    ServiceResolutionError,
)
from .identity import ServiceIdentity, identity_for
from .registry import FactoryRegistry
from .settings import ContainerSettings

__all__ = ["Container"]

T = TypeVar("T")
ConfigurableT = TypeVar("ConfigurableT", bound=Configurable[Any])

ServiceToken = Union[type[T], ServiceIdentity[T]]

_NO_CONFIGURATION: Any = object()

logger = logging.getLogger(__name__)


class Container:
    """Dependency container with lazy, uncached construction.

    Factories receive the container itself so they can resolve their own
    dependencies. Missing registrations and capability mismatches resolve to
    ``None``; use :meth:`require` where absence is a programming error.
    """

    def __init__(
        self,
        settings: ContainerSettings | None = None,
        *,
        registry: FactoryRegistry | None = None,
    ) -> None:
        self.settings = settings or ContainerSettings()
        if registry is None:
            registry = FactoryRegistry(strict=self.settings.strict_registration)
        elif self.settings.strict_registration and not registry.strict:
            raise ValueError("strict_registration requires a strict FactoryRegistry.")
        self._registry = registry

    @property
    def registry(self) -> FactoryRegistry:
        return self._registry

    def register(self, token: ServiceToken[T], factory: Callable[[Container], T]) -> Container:
        """Register ``factory`` for ``token``; it is invoked on every resolve."""
        identity = identity_for(token)
        self._registry.register(identity, factory)
        logger.debug("registered factory for %s", identity)
        return self

    @overload
    def resolve(self, token: ServiceToken[T]) -> T | None: ...

    @overload
    def resolve(
        self, token: ServiceToken[ConfigurableT], configuration: Any
    ) -> ConfigurableT | None: ...

    def resolve(self, token: ServiceToken[Any], configuration: Any = _NO_CONFIGURATION) -> Any:
        """Build a new instance for ``token``, or return None if that fails.

        When ``configuration`` is given the instance is configured before it
        is returned. Supplying a configuration for a service that does not
        implement the configurable contract raises a ``ConfigurationError``.

        Type checkers only see that the token is configurable; the value is
        matched against the type declared with ``@configurable`` at runtime.
        """
        identity = identity_for(token)
        factory = self._registry.lookup(identity)
        if factory is None:
            logger.debug("no factory registered for %s", identity)
            return None

        instance = factory(self)
        if self.settings.verify_capabilities and not identity.accepts(instance):
            logger.debug(
                "factory for %s produced %s, which does not satisfy it",
                identity,
                type(instance).__qualname__,
            )
            return None

        if instance is not None and configuration is not _NO_CONFIGURATION:
            self._configure(instance, configuration)
        return instance

    @overload
    def require(self, token: ServiceToken[T]) -> T: ...

    @overload
    def require(self, token: ServiceToken[ConfigurableT], configuration: Any) -> ConfigurableT: ...

    def require(self, token: ServiceToken[Any], configuration: Any = _NO_CONFIGURATION) -> Any:
        """Like :meth:`resolve` but raise ``ServiceResolutionError`` on absence."""
        instance = self.resolve(token, configuration)
        if instance is None:
            raise ServiceResolutionError(identity_for(token))
        return instance

    def is_registered(self, token: ServiceToken[Any]) -> bool:
        return identity_for(token) in self._registry

    def __contains__(self, token: object) -> bool:
        return isinstance(token, (type, ServiceIdentity)) and self.is_registered(token)

    @staticmethod
    def _configure(instance: Any, configuration: Any) -> None:
        if not isinstance(instance, Configurable):
            raise NotConfigurableError(
                f"{type(instance).__qualname__} does not accept a configuration."
            )
        if not supports_configuration(instance, configuration):
            raise ConfigurationMismatchError(
                type(instance),
                configuration_type_of(instance),
                type(configuration),
            )
        instance.configure(configuration)
