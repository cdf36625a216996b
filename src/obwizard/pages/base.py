"""ABOUTME: Base class for wizard page objects
ABOUTME: Knows which step a page is, how to get there and how to tell it has loaded"""

import logging
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from obwizard import config
from obwizard.domain.value_objects import WizardStep
from obwizard.service_layer.exceptions import StepNotReached

logger = logging.getLogger(__name__)


class WizardPage:
    step: WizardStep

    def __init__(self, page: Page, wizard_cfg: config.WizardCfg | None = None):
        self.page = page
        self.cfg = wizard_cfg or config.WizardCfg.from_env()

    @property
    def url(self) -> str:
        return self.cfg.url_for(self.step.path)

    def goto(self) -> None:
        self.page.goto(self.url)
        self.page.wait_for_load_state("networkidle")

    def wait_until_loaded(self, timeout_ms: float | None = None) -> None:
        """Wait for the browser to arrive at this step.

        Raises:
            StepNotReached: if the URL never matches
        """
        timeout = timeout_ms if timeout_ms is not None else self.cfg.default_timeout_ms
        try:
            self.page.wait_for_url(self.step.url_pattern, timeout=timeout)
        except PlaywrightError as error:
            raise StepNotReached(self.step.name, self.page.url) from error
        logger.info("Reached %s", self.step.path)

    def click_outside(self) -> None:
        """Click the page background, which validates the field that had focus."""
        self.page.locator("#page-layout").click()

    def is_current(self) -> bool:
        return WizardStep.for_url(self.page.url) is self.step

    def screenshot(self, name: str, directory: Path | None = None) -> Path:
        directory = directory or config.get_artifacts_path()
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{self.step.name.lower()}-{name}.png"
        self.page.screenshot(path=str(path), full_page=True)
        return path
