"""Dependency resolution for test members."""

from .assertion_set import AssertionSet, ServiceProvider
from .resolver import DependencyResolver, ResolvedCall
from .stand_ins import AutospecStandInFactory, StandInFactory, is_interface

__all__ = [
    "AssertionSet",
    "AutospecStandInFactory",
    "DependencyResolver",
    "ResolvedCall",
    "ServiceProvider",
    "StandInFactory",
    "is_interface",
]
