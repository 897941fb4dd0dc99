# src/graph/identity.py — v1
"""Identity resolvers: map vertices and edges to textual ids.

Vertices and edges use separate resolvers, so a vertex id ``"1"`` and an
edge id ``"1"`` may coexist in one document.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from graphjson.core.errors import ConfigurationError, NullIdentityError


class BaseIdentityResolver(ABC):
    """Produces the textual id of a component."""

    @abstractmethod
    def id_of(self, component: Any) -> str | None:
        """Return the id of ``component``."""

    def reset(self) -> None:
        """Forget per-export state; called at the start of every export."""


class IntegerIdentityResolver(BaseIdentityResolver):
    """Sequential ids starting at 1, assigned in first-seen order.

    Ids are memoized per component, so components must be hashable. The
    exporter resets the numbering at the start of every export call.
    """

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._next = start
        self._ids: dict[Any, str] = {}

    def reset(self) -> None:
        self._next = self._start
        self._ids.clear()

    def id_of(self, component: Any) -> str:
        component_id = self._ids.get(component)
        if component_id is None:
            component_id = str(self._next)
            self._ids[component] = component_id
            self._next += 1
        return component_id


class StringIdentityResolver(BaseIdentityResolver):
    """Uses ``str(component)`` as the id."""

    def id_of(self, component: Any) -> str:
        return str(component)


class FunctionIdentityResolver(BaseIdentityResolver):
    """Adapts a plain callable to the resolver interface."""

    def __init__(self, func: Callable[[Any], Any]) -> None:
        self._func = func

    def id_of(self, component: Any) -> Any:
        return self._func(component)


def as_identity_resolver(
    resolver: BaseIdentityResolver | Callable[[Any], Any] | None,
) -> BaseIdentityResolver | None:
    """Normalize a resolver argument; None stays None (use the default)."""
    if resolver is None or isinstance(resolver, BaseIdentityResolver):
        return resolver
    if callable(resolver):
        return FunctionIdentityResolver(resolver)
    raise ConfigurationError(
        f"Identity resolver must be a BaseIdentityResolver or callable, "
        f"got {type(resolver).__name__}"
    )


def resolve_id(resolver: BaseIdentityResolver, component: Any, kind: str) -> str:
    """Resolve an id, rejecting None and coercing other values to str.

    Raises:
        NullIdentityError: If the resolver returns None.
    """
    component_id = resolver.id_of(component)
    if component_id is None:
        raise NullIdentityError(kind, component)
    if not isinstance(component_id, str):
        component_id = str(component_id)
    return component_id
