from playwright.sync_api import Locator, Page

from obwizard.adapters.locators import click_with_fallback
from obwizard.config import WizardCfg
from obwizard.domain.value_objects import BusinessSubType, BusinessType, WizardStep
from obwizard.pages.base import WizardPage


class BusinessTypePage(WizardPage):
    step = WizardStep.BUSINESS_TYPE

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.continue_button = self.page.locator('button:has-text("Continue"), #formSubmitButton')

    def type_option(self, business_type: BusinessType) -> Locator:
        return self.page.locator(f"#business-type-{business_type.value}")

    def sub_type_option(self, sub_type: BusinessSubType) -> Locator:
        return self.page.locator(f"#business-sub-type-{sub_type.value}")

    def choose(self, sub_type: BusinessSubType) -> None:
        click_with_fallback(self.type_option(sub_type.parent))
        click_with_fallback(self.sub_type_option(sub_type))

    def click_continue(self) -> None:
        click_with_fallback(self.continue_button.first)
