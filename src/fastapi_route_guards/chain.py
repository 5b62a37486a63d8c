"""GuardChain builder and the immutable ResolvedChain it produces."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from fastapi_route_guards.exceptions import ConfigurationError
from fastapi_route_guards.guard import Guard
from fastapi_route_guards.settings import get_settings

if TYPE_CHECKING:
    from fastapi_route_guards.hooks import PipelineHook


def _names(value: str | Iterable[str] | None) -> frozenset[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return frozenset((value,))
    return frozenset(value)


@dataclass(frozen=True)
class Registration:
    """A guard registered on the chain, optionally scoped to some routes."""

    guard: Guard
    only: frozenset[str] | None = None
    exclude: frozenset[str] = frozenset()

    @property
    def name(self) -> str:
        return self.guard.name

    def applies_to(self, route: str) -> bool:
        if self.only is not None and route not in self.only:
            return False
        return route not in self.exclude


@dataclass(frozen=True)
class RouteBinding:
    """Apply and skip sets of guard names for one route/action identifier.

    ``guards=None`` applies every registered guard. A skipped name is never
    invoked for the route, even when it is also listed in ``guards``.
    """

    route: str
    guards: frozenset[str] | None = None
    skip: frozenset[str] = frozenset()

    def admits(self, name: str) -> bool:
        if name in self.skip:
            return False
        return self.guards is None or name in self.guards


@dataclass(frozen=True)
class ResolvedChain:
    """Immutable, startup-built guard configuration shared by all requests."""

    registrations: tuple[Registration, ...]
    bindings: Mapping[str, RouteBinding] = field(
        default_factory=lambda: MappingProxyType({})
    )
    hooks: tuple[PipelineHook, ...] = ()
    debug: bool = False

    @property
    def guard_names(self) -> tuple[str, ...]:
        return tuple(reg.name for reg in self.registrations)

    def binding_for(self, route: str) -> RouteBinding:
        return self.bindings.get(route) or RouteBinding(route=route)

    def effective_guards(self, route: str) -> tuple[Guard, ...]:
        """Guards that run for ``route``, in registration order."""
        binding = self.binding_for(route)
        return tuple(
            reg.guard
            for reg in self.registrations
            if reg.applies_to(route) and binding.admits(reg.name)
        )


class GuardChain:
    """Ordered registry of guards applied to every route unless skipped.

    Built once at startup; ``resolve()`` freezes it into a ResolvedChain.
    """

    def __init__(self, *guards: Guard, debug: bool | None = None) -> None:
        self._registrations: list[Registration] = [Registration(g) for g in guards]
        self._bindings: dict[str, RouteBinding] = {}
        self._hooks: list[PipelineHook] = []
        self._debug = debug
        self._resolved: ResolvedChain | None = None

    def add(
        self,
        *guards: Guard,
        only: str | Iterable[str] | None = None,
        exclude: str | Iterable[str] | None = None,
    ) -> GuardChain:
        only_routes = _names(only)
        excluded = _names(exclude) or frozenset()
        self._registrations.extend(
            Registration(g, only=only_routes, exclude=excluded) for g in guards
        )
        self._resolved = None
        return self

    def add_hook(self, hook: PipelineHook) -> GuardChain:
        self._hooks.append(hook)
        self._resolved = None
        return self

    def bind(
        self,
        route: str,
        *,
        guards: str | Iterable[str] | None = None,
        skip: str | Iterable[str] = (),
    ) -> GuardChain:
        """Bind ``route`` to an apply set and/or a skip set of guard names.

        Binding a route twice replaces its apply set (when given) and adds
        to its skip set.
        """
        current = self._bindings.get(route, RouteBinding(route=route))
        apply_set = _names(guards)
        self._bindings[route] = RouteBinding(
            route=route,
            guards=current.guards if apply_set is None else apply_set,
            skip=current.skip | (_names(skip) or frozenset()),
        )
        self._resolved = None
        return self

    def skip(self, name: str, *, only: str | Iterable[str]) -> GuardChain:
        """Skip guard ``name`` for each listed route."""
        for route in _names(only) or ():
            self.bind(route, skip=name)
        return self

    def resolve(self) -> ResolvedChain:
        if self._resolved is not None:
            return self._resolved

        known: set[str] = set()
        for reg in self._registrations:
            if reg.name in known:
                raise ConfigurationError(f"Guard {reg.name!r} is registered twice")
            known.add(reg.name)

        for binding in self._bindings.values():
            referenced = binding.skip | (binding.guards or frozenset())
            unknown = sorted(referenced - known)
            if unknown:
                raise ConfigurationError(
                    f"Route {binding.route!r} references unknown guards: "
                    + ", ".join(unknown)
                )

        debug = get_settings().debug if self._debug is None else self._debug
        self._resolved = ResolvedChain(
            registrations=tuple(self._registrations),
            bindings=MappingProxyType(dict(self._bindings)),
            hooks=tuple(self._hooks),
            debug=debug,
        )
        return self._resolved
