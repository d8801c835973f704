"""Example services wired through the container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from dic_core import configurable

__all__ = [
    "ServiceOneProtocol",
    "ServiceTwoProtocol",
    "ServiceThreeProtocol",
    "ServiceOne",
    "ServiceTwo",
    "ServiceThree",
    "ServiceThreeConfiguration",
]


@runtime_checkable
class ServiceOneProtocol(Protocol):
    def get_value(self) -> int: ...


@runtime_checkable
class ServiceTwoProtocol(Protocol):
    def get_value(self) -> int: ...


@runtime_checkable
class ServiceThreeProtocol(Protocol):
    def get_value(self) -> int: ...


class ServiceTwo:
    """Leaf service with no dependencies."""

    def get_value(self) -> int:
        return 7


class ServiceOne:
    """Adds a fixed offset to whatever its ServiceTwo reports."""

    def __init__(self, service_two: ServiceTwoProtocol) -> None:
        self.service_two = service_two

    def get_value(self) -> int:
        return 5 + self.service_two.get_value()


@dataclass(frozen=True)
class ServiceThreeConfiguration:
    param_one: int
    param_two: int


@configurable(ServiceThreeConfiguration)
class ServiceThree:
    """Service whose parameters are only set by ``configure``.

    ``param_one`` and ``param_two`` stay ``None`` until the container applies
    a :class:`ServiceThreeConfiguration`.
    """

    def __init__(self, service_one: ServiceOneProtocol) -> None:
        self.service_one = service_one
        self.param_one: int | None = None
        self.param_two: int | None = None

    def configure(self, configuration: ServiceThreeConfiguration) -> None:
        self.param_one = configuration.param_one
        self.param_two = configuration.param_two

    def get_value(self) -> int:
        return 0
