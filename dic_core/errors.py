"""Custom errors raised by the dependency container."""

from __future__ import annotations

from typing import Any


class ContainerError(Exception):
    """Base class for container errors."""


class DuplicateRegistrationError(ContainerError):
    """Raised by a strict registry when an identity is registered twice."""


class ServiceResolutionError(ContainerError):
    """Raised by ``Container.require`` when a service cannot be produced."""

    def __init__(self, identity: Any) -> None:
        name = getattr(identity, "qualified_name", repr(identity))
        super().__init__(f"{name} could not be resolved.")
        self.identity = identity


class ConfigurationError(ContainerError, TypeError):
    """Base class for misuse of the configurable contract."""


class NotConfigurableError(ConfigurationError):
    """Raised when a configuration is supplied for a non-configurable service."""


class ConfigurationMismatchError(ConfigurationError):
    """Raised when a configuration value does not match the declared type."""

    def __init__(self, service: type, expected: type, actual: type) -> None:
        message = (
            f"{service.__qualname__} expects {expected.__qualname__}, "
            f"got {actual.__qualname__}"
        )
        super().__init__(message)
        self.service = service
        self.expected = expected
        self.actual = actual
