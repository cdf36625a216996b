"""ABOUTME: Resolving elements from an ordered list of candidate locators
ABOUTME: The wizard's DOM shifts between releases, so several selectors are tried in turn"""

import logging
from collections.abc import Sequence

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from obwizard.service_layer.exceptions import ElementNotResolved

logger = logging.getLogger(__name__)


def first_visible(candidates: Sequence[Locator], timeout_ms: float = 5000) -> Locator:
    """Return the first candidate that becomes visible.

    The timeout is split evenly between the candidates, so the whole call is
    bounded by `timeout_ms`.
    """
    if not candidates:
        raise ElementNotResolved([], timeout_ms)
    per_candidate = timeout_ms / len(candidates)
    for candidate in candidates:
        try:
            candidate.first.wait_for(state="visible", timeout=per_candidate)
        except PlaywrightError:
            logger.debug("Candidate %s not visible, trying the next one", candidate)
            continue
        return candidate.first
    raise ElementNotResolved([str(candidate) for candidate in candidates], timeout_ms)


def click_with_fallback(locator: Locator, timeout_ms: float = 5000) -> None:
    """Click, then dispatch a click event, then force the click. The first to succeed wins."""
    attempts = (
        ("click", lambda: locator.click(timeout=timeout_ms)),
        ("dispatch_event", lambda: locator.dispatch_event("click", timeout=timeout_ms)),
        ("forced click", lambda: locator.click(force=True, timeout=timeout_ms)),
    )
    *fallbacks, (_, last_resort) = attempts
    for name, attempt in fallbacks:
        try:
            attempt()
            return
        except PlaywrightError as error:
            logger.debug("%s on %s failed: %s", name, locator, error)
    last_resort()
