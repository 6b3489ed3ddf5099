"""Reachability and prerequisite checks shared by the browser and smoke suites."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from typing import NoReturn

import pytest
import requests

logger = logging.getLogger(__name__)


def wait_for_reachable(url: str, timeout: int = 60, interval: int = 2) -> None:
    """
    Poll ``url`` until it answers with a non-5xx status.

    Hosted instances sleep when idle and answer 5xx or slowly while they
    wake up, so those are retried until ``timeout``. A refused or
    unresolvable connection fails at once.
    """
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            response = requests.get(url, timeout=10)
        except requests.ConnectionError as exc:
            raise RuntimeError(f"{url} not reachable: {exc}") from exc
        except requests.Timeout:
            logger.info("%s timed out, retrying", url)
        else:
            if response.status_code < 500:
                return
            logger.info("%s answered %s, retrying", url, response.status_code)
        time.sleep(interval)
    raise RuntimeError(f"{url} not reachable after {timeout}s")


def live_app_urls(
    *,
    base_url: str,
    api_base_url: str,
    suite_name: str,
    timeout: int = 60,
) -> Generator[tuple[str, str], None, None]:
    """Yield ``(base_url, api_base_url)`` once both answer, otherwise skip the suite."""
    for url in (base_url, api_base_url):
        try:
            wait_for_reachable(url, timeout=timeout)
        except RuntimeError as exc:
            pytest.skip(f"{exc}; set BASE_URL/API_BASE_URL to run {suite_name} tests")
        logger.info("%s is reachable", url)
    yield base_url, api_base_url


def skip_or_fail(reason: str, *, required: bool) -> NoReturn:
    """Skip the current test, or fail it when the missing prerequisite is required."""
    if required:
        pytest.fail(f"{reason} (required in this environment)", pytrace=False)
    pytest.skip(reason)
