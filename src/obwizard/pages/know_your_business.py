from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from obwizard.adapters.locators import click_with_fallback, first_visible
from obwizard.config import WizardCfg
from obwizard.domain.value_objects import WizardStep
from obwizard.pages.base import WizardPage

EIN_ERROR_TEXT = "EIN number isn't valid"


class KnowYourBusinessPage(WizardPage):
    step = WizardStep.KNOW_YOUR_BUSINESS

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.business_name_input = self.page.locator("#BUSINESS_NAME")
        self.ein_input = self.page.locator("#BUSINESS_EIN")
        self.registered_state_select = self.page.locator("#BUSINESS_REGISTER_STATE")
        self.agreement_checkbox = self.page.locator("#CHECKBOX_SOLE_BENEFICIAL_AGREEMENT")
        self.continue_button = self.page.locator('#formSubmitButton, button:has-text("Continue")')
        self.ein_error = self.page.get_by_text(EIN_ERROR_TEXT)

    def fill_business_name(self, name: str) -> None:
        self.business_name_input.fill(name)

    def fill_ein(self, ein: str) -> None:
        self.ein_input.fill(ein)

    def select_registered_state(self, state: str) -> None:
        self.registered_state_select.click()
        option = first_visible(
            [self.page.get_by_role("option", name=state), self.page.locator(f"text={state}")],
            timeout_ms=self.cfg.default_timeout_ms,
        )
        click_with_fallback(option)

    def accept_agreement(self) -> None:
        if self.agreement_checkbox.count() > 0 and not self.agreement_checkbox.is_checked():
            self.agreement_checkbox.check(force=True)

    def has_ein_error(self, timeout_ms: float = 3000) -> bool:
        try:
            self.ein_error.first.wait_for(state="visible", timeout=timeout_ms)
        except PlaywrightError:
            return False
        return True

    def click_continue(self) -> None:
        click_with_fallback(self.continue_button.first)
