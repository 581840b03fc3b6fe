"""Resolution of the instance and argument values a test member is invoked with."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from smartunit.injection.assertion_set import ServiceProvider
from smartunit.injection.stand_ins import AutospecStandInFactory, StandInFactory, is_interface

if TYPE_CHECKING:
    from smartunit.testing.scanner import ParameterInfo, TestMember

logger = logging.getLogger(__name__)


@dataclass
class ResolvedCall:
    """Everything needed to invoke a member once."""

    instance: Any
    arguments: list[Any] = field(default_factory=list)


class DependencyResolver:
    """Supplies values for a member's parameters.

    Per parameter, in order:

    1. a callback-marked parameter is bound to ``callback`` when one is given;
    2. with an assertion set in effect, a registered value for the declared type;
    3. an inert stand-in when the declared type is an interface;
    4. otherwise the parameter's default, or None.
    """

    def __init__(self, stand_ins: StandInFactory | None = None) -> None:
        self.stand_ins = stand_ins or AutospecStandInFactory()

    def activate(self, member: TestMember) -> ServiceProvider | None:
        """Build a fresh container from the member's assertion set, if it has one."""
        assertion_set_type = member.assertion_set
        if assertion_set_type is None:
            return None
        assertion_set = assertion_set_type()
        assertion_set.configure()
        if not member.owner_is_module:
            assertion_set.add_singleton(member.owner)
        logger.debug("activated %s for %s", assertion_set_type.__qualname__, member.id)
        return assertion_set.build()

    def resolve_instance(self, member: TestMember, provider: ServiceProvider | None) -> Any:
        if not member.needs_instance:
            return None
        if provider is not None:
            return provider.resolve_required(member.owner)
        return member.owner()

    def resolve_parameter(
        self,
        param: ParameterInfo,
        provider: ServiceProvider | None,
        callback: Callable[..., Any] | None = None,
    ) -> Any:
        if param.is_callback and callback is not None:
            return callback

        service = param.service_type
        if provider is not None and service is not inspect.Parameter.empty:
            value = provider.try_resolve(service)
            if value is not None:
                return value

        if is_interface(service):
            return self.stand_ins.create(service)

        return param.default if param.has_default else None

    def resolve_parameters(
        self,
        member: TestMember,
        provider: ServiceProvider | None,
        callback: Callable[..., Any] | None = None,
    ) -> list[Any]:
        return [self.resolve_parameter(param, provider, callback) for param in member.parameters]

    def resolve(self, member: TestMember, callback: Callable[..., Any] | None = None) -> ResolvedCall:
        provider = self.activate(member)
        instance = self.resolve_instance(member, provider)
        return ResolvedCall(instance, self.resolve_parameters(member, provider, callback))


__all__ = ["DependencyResolver", "ResolvedCall"]
