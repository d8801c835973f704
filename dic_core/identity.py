"""Service identity keyed by the declared type token."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

__all__ = ["ServiceIdentity", "identity_for"]

T = TypeVar("T")


def _is_static_protocol(token: type) -> bool:
    return bool(getattr(token, "_is_protocol", False)) and not getattr(
        token, "_is_runtime_protocol", False
    )


@dataclass(frozen=True)
class ServiceIdentity(Generic[T]):
    """Immutable key for a registered capability.

    Identities compare and hash by the token object, so two classes that
    share a ``__qualname__`` in different modules stay distinct.
    """

    token: type[T]

    def __post_init__(self) -> None:
        if not isinstance(self.token, type):
            raise TypeError(f"service token must be a class, got {self.token!r}")
        if _is_static_protocol(self.token):
            raise TypeError(
                f"{self.token.__qualname__} must be decorated with @runtime_checkable "
                "to be used as a service token."
            )

    @property
    def qualified_name(self) -> str:
        """Return the ``module:QualName`` label used in logs and errors."""

        return f"{self.token.__module__}:{self.token.__qualname__}"

    def accepts(self, instance: Any) -> bool:
        return isinstance(instance, self.token)

    def __str__(self) -> str:
        return self.qualified_name


def identity_for(token: type[T] | ServiceIdentity[T]) -> ServiceIdentity[T]:
    """Return the identity for ``token``; identities pass through untouched."""

    if isinstance(token, ServiceIdentity):
        return token
    return ServiceIdentity(token)
