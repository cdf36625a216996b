from playwright.sync_api import Page

from obwizard.config import WizardCfg
from obwizard.domain.value_objects import WizardStep
from obwizard.pages.base import WizardPage


class WelcomePage(WizardPage):
    step = WizardStep.WELCOME

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.email_input = self.page.locator("#EMAIL")
        self.password_input = self.page.locator("#PASSWORD")
        self.get_started_button = self.page.get_by_role("button", name="GET STARTED")
        self.email_error = self.page.locator("#EMAIL-error-container")
        self.clear_email_button = self.page.locator("#EMAIL-floating-label #ClearInput")
        self.show_hide_password_button = self.page.locator("#showHidePassword-PASSWORD")
        self.password_hint = self.page.locator('[data-tooltip-id="password-hint"]')
        self.minimum_characters_text = self.page.get_by_text("Minimum 8 characters")

    def fill_email(self, email: str) -> None:
        self.email_input.fill(email)

    def fill_password(self, password: str) -> None:
        self.password_input.fill(password)

    def click_get_started(self) -> None:
        self.get_started_button.click()

    def clear_email(self) -> None:
        self.clear_email_button.click()
