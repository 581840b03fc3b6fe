"""Demonstrates assertion sets, stand-ins, and skipped tests.

Run with ``smartunit run examples -v``.
"""

import asyncio
from typing import Protocol

import smartunit
from smartunit import AssertionSet, assert_raises, assert_that


class Greeter(Protocol):
    def greet(self, name: str) -> str: ...


class Mailer(Protocol):
    async def send(self, to: str, body: str) -> None: ...


class PoliteGreeter:
    def greet(self, name: str) -> str:
        return f"Hello, {name}!"


class Chatbot:
    def __init__(self, greeter: Greeter):
        self.greeter = greeter

    def reply(self, prompt: str) -> str:
        if not prompt:
            raise ValueError("empty prompt")
        return self.greeter.greet(prompt)


class ChatbotServices(AssertionSet):
    def configure(self):
        self.add_singleton(Greeter, PoliteGreeter)
        self.add_transient(Chatbot)


@smartunit.assertion_set(ChatbotServices)
class ChatbotTests:
    @smartunit.assertion
    def greets_by_name(self, bot: Chatbot):
        assert_that(bot.reply("Alice"), lambda text: text == "Hello, Alice!")

    @smartunit.assertion(name="empty prompts are rejected")
    def rejects_empty_prompt(self, bot: Chatbot):
        assert_raises(bot, ValueError, lambda b: b.reply(""))

    @smartunit.assertion
    async def mailer_is_a_stand_in(self, mailer: Mailer):
        # nothing registers Mailer, so an inert stand-in is injected
        await mailer.send("ops@example.com", "hi")
        await asyncio.sleep(0)

    @smartunit.skip(reason="Dependency still offline")
    @smartunit.assertion
    def external_dependency(self):
        raise RuntimeError("Should never execute")
