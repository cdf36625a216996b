from playwright.sync_api import Page

from obwizard.config import WizardCfg
from obwizard.domain.value_objects import WizardStep
from obwizard.pages.base import WizardPage


class IdentityPage(WizardPage):
    step = WizardStep.IDENTITY

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.ssn_input = self.page.locator("#SSN")
        self.date_of_birth_input = self.page.locator("#DATE_OF_BIRTH")
        self.continue_button = self.page.get_by_role("button", name="Continue")
        self.ssn_error = self.page.locator("#SSN-error-container")
        self.date_of_birth_error = self.page.locator("#DATE_OF_BIRTH-error-container")
        self.too_young_error = self.page.get_by_text("Sorry, but you have to be at least 18 to open an account")
        self.cannot_open_account_error = self.page.get_by_text(
            "We're sorry, but we cannot open an account for you at this time"
        )

    def fill_identity(self, ssn: str, date_of_birth: str) -> None:
        self.ssn_input.fill(ssn)
        self.date_of_birth_input.fill(date_of_birth)

    def click_continue(self) -> None:
        self.continue_button.click()
