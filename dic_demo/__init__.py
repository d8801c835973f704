"""Example services and composition root built on ``dic_core``."""

from .composition import (
    DemoContainer,
    HasServiceOne,
    HasServiceTwo,
    ProtocolOrientedParent,
    ServiceDependencies,
    create_container,
    create_service_three,
)
from .services import (
    ServiceOne,
    ServiceOneProtocol,
    ServiceThree,
    ServiceThreeConfiguration,
    ServiceThreeProtocol,
    ServiceTwo,
    ServiceTwoProtocol,
)

__all__ = [
    "DemoContainer",
    "HasServiceOne",
    "HasServiceTwo",
    "ProtocolOrientedParent",
    "ServiceDependencies",
    "create_container",
    "create_service_three",
    "ServiceOne",
    "ServiceOneProtocol",
    "ServiceThree",
    "ServiceThreeConfiguration",
    "ServiceThreeProtocol",
    "ServiceTwo",
    "ServiceTwoProtocol",
]
