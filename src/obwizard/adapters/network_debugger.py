"""ABOUTME: Logs the network traffic of a page while a journey runs
ABOUTME: Switched on with NETWORK_DEBUG for diagnosing failures against the integration environment"""

import logging
from dataclasses import asdict, dataclass

from playwright.sync_api import ConsoleMessage, Page, Request, Response

logger = logging.getLogger(__name__)


@dataclass
class NetworkStats:
    requests: int = 0
    responses: int = 0
    failures: int = 0
    console_errors: int = 0


class NetworkDebugger:
    def __init__(self, page: Page):
        self.page = page
        self.stats = NetworkStats()
        self.enabled = False

    def enable(self) -> None:
        if self.enabled:
            return
        self.enabled = True
        self.stats = NetworkStats()
        self.page.on("request", self._on_request)
        self.page.on("response", self._on_response)
        self.page.on("requestfailed", self._on_request_failed)
        self.page.on("console", self._on_console)

    def disable(self) -> None:
        if not self.enabled:
            return
        self.enabled = False
        self.page.remove_listener("request", self._on_request)
        self.page.remove_listener("response", self._on_response)
        self.page.remove_listener("requestfailed", self._on_request_failed)
        self.page.remove_listener("console", self._on_console)

    def summary(self) -> dict[str, int]:
        return asdict(self.stats)

    def log_summary(self) -> None:
        stats = self.stats
        log = logger.warning if stats.failures else logger.info
        log(
            "Network summary: %d requests, %d responses, %d failures, %d console errors",
            stats.requests,
            stats.responses,
            stats.failures,
            stats.console_errors,
        )

    def _on_request(self, request: Request) -> None:
        self.stats.requests += 1
        logger.debug("request #%d: %s %s", self.stats.requests, request.method, request.url)

    def _on_response(self, response: Response) -> None:
        self.stats.responses += 1
        if response.status >= 400:
            logger.warning(
                "response #%d: %d %s %s", self.stats.responses, response.status, response.status_text, response.url
            )
        else:
            logger.debug("response #%d: %d %s", self.stats.responses, response.status, response.url)

    def _on_request_failed(self, request: Request) -> None:
        self.stats.failures += 1
        logger.warning("request failed #%d: %s (%s)", self.stats.failures, request.url, request.failure)

    def _on_console(self, message: ConsoleMessage) -> None:
        if message.type == "error":
            self.stats.console_errors += 1
            logger.warning("console error: %s", message.text)
