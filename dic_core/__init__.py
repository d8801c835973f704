"""Minimal dependency-injection container with an optional configuration phase."""

from .configurable import (
    Configurable,
    configurable,
    configuration_type_of,
    supports_configuration,
)
from .container import Container
from .errors import (
    ConfigurationError,
    ConfigurationMismatchError,
    ContainerError,
    DuplicateRegistrationError,
    NotConfigurableError,
    ServiceResolutionError,
)
from .identity import ServiceIdentity, identity_for
from .registry import Factory, FactoryRegistry
from .settings import ContainerSettings, default_settings_path

__all__ = [
    "Configurable",
    "configurable",
    "configuration_type_of",
    "supports_configuration",
    "Container",
    "ContainerSettings",
    "default_settings_path",
    "Factory",
    "FactoryRegistry",
    "ServiceIdentity",
    "identity_for",
    "ContainerError",
    "DuplicateRegistrationError",
    "ServiceResolutionError",
    "ConfigurationError",
    "NotConfigurableError",
    "ConfigurationMismatchError",
]
