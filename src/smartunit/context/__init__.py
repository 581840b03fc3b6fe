from .context import (
    TEST_CONTEXT,
    THEORY_CONTEXT,
    TestContext,
    TheoryScope,
    current_test,
    test_context_scope,
    theory_context_scope,
)

__all__ = [
    "TestContext",
    "TheoryScope",
    "TEST_CONTEXT",
    "THEORY_CONTEXT",
    "current_test",
    "test_context_scope",
    "theory_context_scope",
]
