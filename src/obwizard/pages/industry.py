from playwright.sync_api import Locator, Page

from obwizard.adapters.locators import click_with_fallback, first_visible
from obwizard.config import WizardCfg
from obwizard.domain.value_objects import WizardStep
from obwizard.pages.base import WizardPage


class IndustryPage(WizardPage):
    step = WizardStep.INDUSTRY

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.industry_select = self.page.locator('#INDUSTRY, [data-testid="INDUSTRY"]').first
        self.sub_industry_select = self.page.locator('#SUB_INDUSTRY, [data-testid="SUB_INDUSTRY"]').first
        self.continue_button = self.page.locator('button:has-text("Continue"), #formSubmitButton')
        self.banned_activities_tooltip = self.page.locator('svg[data-tooltip-id="tooltip-banned-activities"]')

    def _pick(self, dropdown: Locator, text: str) -> None:
        dropdown.click()
        option = first_visible(
            [self.page.get_by_role("option", name=text), self.page.locator(f"text={text}")],
            timeout_ms=self.cfg.default_timeout_ms,
        )
        click_with_fallback(option)

    def select_industry(self, industry: str) -> None:
        self._pick(self.industry_select, industry)

    def select_sub_industry(self, sub_industry: str) -> None:
        self._pick(self.sub_industry_select, sub_industry)

    def click_continue(self) -> None:
        click_with_fallback(self.continue_button.first)
