from playwright.sync_api import Page

from obwizard.config import WizardCfg
from obwizard.domain.value_objects import WizardStep
from obwizard.pages.base import WizardPage


class PhonePage(WizardPage):
    step = WizardStep.PHONE

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.country_code_button = self.page.locator("[data-testid='PHONE_NUMBER-button-trigger']")
        self.phone_number_input = self.page.locator("[data-testid='PHONE_NUMBER-international-phone-num']")
        self.continue_button = self.page.get_by_role("button", name="Continue")
        self.phone_number_error = self.page.get_by_text("Please enter a valid mobile number")

    def fill_phone_number(self, phone: str) -> None:
        self.phone_number_input.fill(phone)

    def click_continue(self) -> None:
        self.continue_button.click()
