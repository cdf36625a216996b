"""ABOUTME: Disposable inbox adapters for reading emailed verification codes
ABOUTME: Playwright implementation drives a secondary tab against mailforspam.com"""

import logging
from abc import ABC, abstractmethod

from playwright.sync_api import BrowserContext, Page
from playwright.sync_api import Error as PlaywrightError

from obwizard.config import InboxCfg
from obwizard.domain.mfa import extract_code
from obwizard.service_layer.exceptions import FatalSetupError

logger = logging.getLogger(__name__)


class AbstractInbox(ABC):
    """A disposable inbox that can be searched by address prefix and read for a code."""

    @abstractmethod
    def open(self) -> None:
        """Open the inbox. Raises FatalSetupError if it cannot be reached."""
        raise NotImplementedError

    @abstractmethod
    def search(self, email_prefix: str) -> None:
        """Show the messages for one address.

        Args:
            email_prefix: The part of the address before the @

        Raises:
            FatalSetupError: if the search could not be submitted
        """
        raise NotImplementedError

    @abstractmethod
    def find_code(self) -> str | None:
        """Make one attempt at reading the verification code.

        Returns:
            The 6 digit code, or None if the message has not arrived yet or
            anything went wrong while looking for it
        """
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Release the inbox. Safe to call more than once, and open() may follow."""
        raise NotImplementedError


class MailForSpamInbox(AbstractInbox):
    """Reads mailforspam.com in its own tab, sharing the caller's browser context."""

    def __init__(self, context: BrowserContext, inbox_cfg: InboxCfg | None = None, render_delay: float = 1.0):
        self.context = context
        self.cfg = inbox_cfg or InboxCfg()
        self.render_delay = render_delay
        self._page: Page | None = None
        self._closed = False

    @property
    def page(self) -> Page | None:
        return self._page

    def open(self) -> None:
        if self._closed:
            # reused after close(), start again with a new tab
            self._page = None
            self._closed = False
        if self._page is not None:
            return
        try:
            self._page = self.context.new_page()
        except PlaywrightError as error:
            raise FatalSetupError("open a new tab", str(error)) from error
        try:
            self._page.set_viewport_size(self.cfg.viewport.as_dict())
            logger.debug("Navigating to inbox %s", self.cfg.url)
            self._page.goto(self.cfg.url)
            self._page.wait_for_load_state("networkidle")
        except PlaywrightError as error:
            raise FatalSetupError(f"load {self.cfg.url}", str(error)) from error

    def search(self, email_prefix: str) -> None:
        page = self._require_page("search the inbox")
        try:
            search_box = page.locator(self.cfg.search_input)
            search_box.fill(email_prefix)
            submit = page.locator(self.cfg.search_submit)
            if submit.count() > 0:
                submit.first.click()
            else:
                logger.debug("No submit button on the inbox page, pressing Enter instead")
                search_box.press("Enter")
        except PlaywrightError as error:
            raise FatalSetupError(f"search the inbox for '{email_prefix}'", str(error)) from error

    def find_code(self) -> str | None:
        page = self._require_page("read the inbox")
        try:
            link = page.locator(f'a:has-text("{self.cfg.message_link_text}")')
            if link.count() > 0:
                logger.debug("Verification email is listed, opening it")
                link.first.click()
                page.wait_for_timeout(self.render_delay * 1000)
            body = page.locator(self.cfg.message_body)
            if body.count() == 0:
                return None
            return extract_code(body.first.text_content())
        except PlaywrightError as error:
            logger.warning("Reading the inbox failed, will try again: %s", error)
            return None

    def close(self) -> None:
        if self._page is None or self._closed:
            return
        self._closed = True
        try:
            self._page.close()
        except PlaywrightError as error:
            logger.warning("Closing the inbox tab failed: %s", error)

    def _require_page(self, step: str) -> Page:
        if self._page is None or self._closed:
            raise FatalSetupError(step, "the inbox tab is not open")
        return self._page
