"""Assertion sets: per-test dependency configurations backed by punq."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import punq

from smartunit.errors import MissingRegistrationError

logger = logging.getLogger(__name__)


class ServiceProvider:
    """Resolver handle produced by :meth:`AssertionSet.build`."""

    def __init__(self, container: punq.Container, registered: frozenset[Any]) -> None:
        self._container = container
        self._registered = registered

    def is_registered(self, service: Any) -> bool:
        try:
            return service in self._registered
        except TypeError:  # unhashable annotation
            return False

    def try_resolve(self, service: Any) -> Any | None:
        """Resolve ``service`` if it was registered, else return None.

        Failures while building a registered service propagate.
        """
        if not self.is_registered(service):
            return None
        return self._container.resolve(service)

    def resolve_required(self, service: Any) -> Any:
        if not self.is_registered(service):
            raise MissingRegistrationError(service)
        return self._container.resolve(service)


class AssertionSet(ABC):
    """User-defined dependency configuration for a test or a group of tests.

    Subclasses populate the container in :meth:`configure`. A fresh instance,
    and therefore a fresh container, is created for every test invocation::

        class Services(AssertionSet):
            def configure(self) -> None:
                self.add_singleton(Clock, FrozenClock)
                self.add_transient(Repository)
    """

    def __init__(self) -> None:
        self._container = punq.Container()
        self._registered: set[Any] = set()

    @abstractmethod
    def configure(self) -> None:
        """Register the services available to tests using this set."""

    def add_transient(self, service: Any, implementation: Any = None) -> AssertionSet:
        """Build a new ``implementation`` (default: ``service``) on every resolve."""
        return self._register(service, implementation, punq.Scope.transient)

    def add_singleton(self, service: Any, implementation: Any = None) -> AssertionSet:
        """Build ``implementation`` (default: ``service``) once per container."""
        return self._register(service, implementation, punq.Scope.singleton)

    def add_instance(self, service: Any, instance: Any) -> AssertionSet:
        """Resolve ``service`` to an already constructed ``instance``."""
        self._container.register(service, instance=instance)
        self._registered.add(service)
        return self

    def _register(self, service: Any, implementation: Any, scope: punq.Scope) -> AssertionSet:
        if implementation is None:
            self._container.register(service, scope=scope)
        else:
            self._container.register(service, implementation, scope=scope)
        self._registered.add(service)
        logger.debug("registered %r -> %r (%s)", service, implementation or service, scope.name)
        return self

    def build(self) -> ServiceProvider:
        return ServiceProvider(self._container, frozenset(self._registered))


__all__ = ["AssertionSet", "ServiceProvider"]
