"""Composition root for the example services."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from dic_core import Container, ContainerSettings

from .services import (
    ServiceOne,
    ServiceOneProtocol,
    ServiceThree,
    ServiceThreeConfiguration,
    ServiceTwo,
    ServiceTwoProtocol,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class HasServiceOne(Protocol):
    @property
    def service_one(self) -> ServiceOneProtocol: ...


@runtime_checkable
class HasServiceTwo(Protocol):
    @property
    def service_two(self) -> ServiceTwoProtocol: ...


class ServiceDependencies(HasServiceOne, HasServiceTwo, Protocol):
    """Everything ``ProtocolOrientedParent`` needs."""


class DemoContainer(Container):
    """Container with accessors for the frequently used example services."""

    @property
    def service_one(self) -> ServiceOneProtocol:
        return self.require(ServiceOneProtocol)

    @property
    def service_two(self) -> ServiceTwoProtocol:
        return self.require(ServiceTwoProtocol)


class ProtocolOrientedParent:
    """Consumer that only sees the ``Has*`` accessors, not the container."""

    def __init__(self, dependencies: ServiceDependencies) -> None:
        self.dependencies = dependencies

    @classmethod
    def from_container(cls, container: DemoContainer) -> "ProtocolOrientedParent":
        return cls(container)

    def total(self) -> int:
        return (
            self.dependencies.service_one.get_value()
            + self.dependencies.service_two.get_value()
        )


def create_container(settings: ContainerSettings | None = None) -> DemoContainer:
    """Register the example services and return the populated container."""

    container = DemoContainer(settings)
    container.register(
        ServiceOneProtocol,
        lambda c: ServiceOne(service_two=c.require(ServiceTwoProtocol)),
    )
    container.register(ServiceTwoProtocol, lambda _: ServiceTwo())
    # Registered under the concrete class: configuration is tied to it.
    container.register(
        ServiceThree,
        lambda c: ServiceThree(service_one=c.require(ServiceOneProtocol)),
    )
    logger.debug("demo container ready: %s", ", ".join(container.registry.display_names()))
    return container


def create_service_three(container: Container) -> ServiceThree:
    configuration = ServiceThreeConfiguration(param_one=2, param_two=3)
    return container.require(ServiceThree, configuration)
