"""Sample source using assertion sets."""

from typing import Protocol

from smartunit import AssertionSet, assertion, assertion_set

CALLS: list[str] = []
RECEIVED: dict[str, object] = {}


class Clock(Protocol):
    def now(self) -> int: ...


class FixedClock:
    def now(self) -> int:
        return 7


class Fuel:
    def __init__(self, octane: int):
        self.octane = octane


class Engine:
    def __init__(self, fuel: Fuel):
        self.fuel = fuel


class ClockServices(AssertionSet):
    def configure(self):
        CALLS.append("configure")
        self.add_singleton(Clock, FixedClock)


class EmptyServices(AssertionSet):
    def configure(self):
        pass


class BrokenServices(AssertionSet):
    def configure(self):
        self.add_transient(Engine)


@assertion_set(ClockServices)
class ClockTests:
    def __init__(self, clock: Clock):
        self.clock = clock

    @assertion
    def uses_clock(self, clock: Clock):
        CALLS.append("uses_clock")
        RECEIVED["clock"] = clock
        RECEIVED["ctor_clock"] = self.clock
        assert clock.now() == 7


@assertion_set(ClockServices)
class OverrideTests:
    @assertion_set(EmptyServices)
    @assertion
    def overridden(self, clock: Clock):
        CALLS.append("overridden")
        RECEIVED["overridden_clock"] = clock


class BrokenTests:
    @assertion_set(BrokenServices)
    @assertion
    def needs_engine(self, engine: Engine):
        CALLS.append("needs_engine")


@assertion_set(ClockServices)
@assertion
def function_with_services(clock: Clock):
    CALLS.append("function_with_services")
    RECEIVED["function_clock"] = clock
