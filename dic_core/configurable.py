"""Second-phase configuration contract for container-built services."""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

__all__ = [
    "Configurable",
    "configurable",
    "configuration_type_of",
    "supports_configuration",
]

C_contra = TypeVar("C_contra", contravariant=True)
_ServiceClass = TypeVar("_ServiceClass", bound=type)

_CONFIGURATION_ATTR = "__dic_configuration__"


@runtime_checkable
class Configurable(Protocol[C_contra]):
    """A service that accepts a typed configuration after construction.

    ``configure`` is called once by the container, right after the factory
    returns and before the instance reaches the caller.
    """

    def configure(self, configuration: C_contra) -> None:
        """Apply every field of ``configuration`` to the instance."""


def configurable(configuration_type: type) -> Callable[[_ServiceClass], _ServiceClass]:
    """Mark a service class as accepting ``configuration_type`` values."""

    if not isinstance(configuration_type, type):
        raise TypeError("configuration type must be a class.")

    def wrap(cls: _ServiceClass) -> _ServiceClass:
        if not isinstance(cls, type):
            raise TypeError("Decorated object must be a class.")
        if not callable(getattr(cls, "configure", None)):
            raise TypeError(f"{cls.__name__} must define configure() to be configurable.")
        setattr(cls, _CONFIGURATION_ATTR, configuration_type)
        return cls

    return wrap


def configuration_type_of(target: Any) -> type | None:
    cls = target if isinstance(target, type) else type(target)
    return getattr(cls, _CONFIGURATION_ATTR, None)


def supports_configuration(instance: Any, configuration: Any) -> bool:
    """Return True when ``instance`` can be configured with ``configuration``.

    Undecorated classes that still implement ``configure`` accept any value.
    """

    if not isinstance(instance, Configurable):
        return False
    expected = configuration_type_of(instance)
    return expected is None or isinstance(configuration, expected)
