"""Demonstrates nested tests run through their parent's callback."""

from collections.abc import Callable
from typing import Annotated

from smartunit import Callback, assertion


def simple_chatbot(prompt: str) -> str:
    return f"Hello, {prompt}!"


class GreetingTheories:
    def greetings(self, check: Annotated[Callable[[str, str], None], Callback]):
        @assertion(name="greeting matches")
        def greets(prompt, expected):
            assert simple_chatbot(prompt) == expected

        for prompt, expected in [("World", "Hello, World!"), ("Alice", "Hello, Alice!")]:
            check(prompt, expected)
