"""
Pair UI actions with the network responses they are expected to cause.

The coordinator arms one ``page.expect_response`` wait per expected
response *before* it performs the action. Arming after the click would
lose responses that arrive before the listener exists, and the wait
would then hang until it times out.

Example:
    interception = Interception(page)
    responses = interception.await_responses(
        [InterceptSpec("/api/leave", "POST", 201), InterceptSpec("/api/leave", "GET", 200)],
        trigger='[data-testid="leave-request-submit-button"]',
        return_responses=True,
    )
    leave_id = responses[0].json()["leaveId"]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Union

from playwright.sync_api import Locator, Page, Request, Response
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from shared.errors import ElementNotActionable, ElementNotFound, InterceptionTimeout

logger = logging.getLogger(__name__)

Trigger = Union[str, Locator, Callable[[], object], None]


@dataclass(frozen=True)
class InterceptSpec:
    """One expected network exchange: URL fragment, HTTP verb and status."""

    url: str
    method: str
    status_code: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())

    def __str__(self) -> str:
        return f"{self.method} *{self.url}* -> {self.status_code}"


def matches(response: Response, spec: InterceptSpec) -> bool:
    """Return True when ``response`` satisfies every field of ``spec``."""
    return (
        spec.url in response.url
        and response.request.method == spec.method
        and response.status == spec.status_code
    )


def response_predicate(spec: InterceptSpec) -> Callable[[Response], bool]:
    """Build a predicate for ``page.expect_response`` bound to ``spec``."""

    def _predicate(response: Response) -> bool:
        return matches(response, spec)

    return _predicate


def trigger_action(page: Page, target: Trigger = None, timeout: float | None = None) -> None:
    """
    Perform a single UI interaction.

    Args:
        page: Page the interaction happens on.
        target: Selector string or Locator to click (first match), a
            zero-argument callable that performs the action, or None/False
            when the caller drives the action itself.
        timeout: Click/lookup timeout in milliseconds; page default when None.

    Raises:
        ElementNotFound: No element matched within the timeout.
        ElementNotActionable: The element exists but could not be clicked.
    """
    if target is None or target is False:
        return

    if isinstance(target, Locator):
        locator = target.first
        description = str(target)
    elif isinstance(target, str):
        locator = page.locator(target).first
        description = target
    elif callable(target):
        target()
        return
    else:
        raise TypeError(f"Unsupported trigger: {target!r}")

    try:
        locator.wait_for(state="attached", timeout=timeout)
    except PlaywrightTimeoutError as exc:
        raise ElementNotFound(description, timeout) from exc

    try:
        locator.click(timeout=timeout)
    except PlaywrightTimeoutError as exc:
        raise ElementNotActionable(description, timeout) from exc


class Interception:
    """
    Coordinate expected responses with the action that causes them.

    The page is shared with the rest of the test and is never owned here.
    Each call arms fresh waits; nothing is remembered between calls.
    """

    def __init__(self, page: Page, timeout: float | None = None):
        """
        Initialize the coordinator.

        Args:
            page: Playwright page instance.
            timeout: Response wait timeout in milliseconds. None uses the
                page's default timeout.
        """
        self.page = page
        self.timeout = timeout

    def await_responses(
        self,
        specs: Iterable[InterceptSpec],
        trigger: Trigger = None,
        return_responses: bool = False,
    ) -> "list[Response] | Interception":
        """
        Arm a wait per spec, fire the trigger once, then wait for them all.

        Args:
            specs: Expected responses. They may arrive in any order.
            trigger: Action to perform once every wait is armed.
            return_responses: Return the matched responses instead of self.

        Returns:
            Matched responses in ``specs`` order, or self for chaining.

        Raises:
            InterceptionTimeout: A spec had no matching response in time.
            ElementNotFound: The trigger selector matched nothing.
            ElementNotActionable: The trigger element could not be clicked.
        """
        specs = list(specs)

        with ExitStack() as stack:
            waits = [
                stack.enter_context(
                    self.page.expect_response(response_predicate(spec), timeout=self.timeout)
                )
                for spec in specs
            ]
            logger.debug("Armed %d response wait(s): %s", len(waits), ", ".join(map(str, specs)))

            trigger_action(self.page, trigger)

            responses = []
            for spec, wait in zip(specs, waits):
                try:
                    response = wait.value
                except PlaywrightTimeoutError as exc:
                    logger.warning("Timed out waiting for %s", spec)
                    raise InterceptionTimeout(spec, self.timeout) from exc
                logger.info("Observed %s %s -> %s", spec.method, response.url, response.status)
                responses.append(response)

        if return_responses:
            return responses
        return self

    def wait_for(self, spec: InterceptSpec, trigger: Trigger = None) -> Response:
        """Await a single response and return it."""
        return self.await_responses([spec], trigger, return_responses=True)[0]

    @contextmanager
    def record_requests(self, url: str, method: str) -> Iterator[list[Request]]:
        """
        Collect requests to ``url`` with ``method`` issued inside the block.

        Used to prove an action did *not* reach the backend.
        """
        method = method.upper()
        seen: list[Request] = []

        def _record(request: Request) -> None:
            if url in request.url and request.method == method:
                seen.append(request)

        self.page.on("request", _record)
        try:
            yield seen
        finally:
            self.page.remove_listener("request", _record)
