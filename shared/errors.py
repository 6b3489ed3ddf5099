"""Error taxonomy raised by the browser automation helpers."""

from __future__ import annotations

from typing import Any


def _describe_timeout(timeout: float | None) -> str:
    if timeout is None:
        return "the page default timeout"
    return f"{timeout} ms"


class AutomationError(Exception):
    """Base class for failures raised by the automation layer."""


class ElementNotFound(AutomationError):
    """No element matched a selector within the timeout."""

    def __init__(self, selector: str, timeout: float | None = None):
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"No element matched {selector!r} within {_describe_timeout(timeout)}")


class ElementNotActionable(AutomationError):
    """An element exists but could not be clicked (hidden, disabled, covered)."""

    def __init__(self, selector: str, timeout: float | None = None):
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"Element {selector!r} was not actionable within {_describe_timeout(timeout)}")


class InterceptionTimeout(AutomationError):
    """An expected network response was not observed in time."""

    def __init__(self, spec: Any, timeout: float | None = None):
        self.spec = spec
        self.timeout = timeout
        super().__init__(
            f"No {spec.method} response from a URL containing {spec.url!r} "
            f"with status {spec.status_code} within {_describe_timeout(timeout)}"
        )


class AssertionMismatch(AutomationError, AssertionError):
    """Observed page state differs from what a step expected."""

    def __init__(self, what: str, expected: Any, actual: Any):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what}: expected {expected!r}, got {actual!r}")
