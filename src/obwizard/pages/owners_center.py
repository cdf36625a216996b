from playwright.sync_api import Page

from obwizard.adapters.locators import click_with_fallback
from obwizard.config import WizardCfg
from obwizard.domain.value_objects import WizardStep
from obwizard.pages.base import WizardPage


class OwnersCenterPage(WizardPage):
    step = WizardStep.OWNERS_CENTER

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.owner_name = self.page.locator("#elPOwnerFullName")
        self.owner_percentage_input = self.page.locator("#OWNER_PERCENTAGE")
        self.add_owner_button = self.page.locator("#elBtnAddOwner")
        self.only_owner_checkbox = self.page.locator("#elPSingleUbo")
        self.multi_owner_consent_checkbox = self.page.locator("#elCheckbox")
        self.continue_button = self.page.locator('#formSubmitButton, button:has-text("Continue")')

    def fill_ownership(self, percentage: int) -> None:
        if not 0 < percentage <= 100:
            raise ValueError(f"Ownership must be between 1 and 100 percent, got {percentage}")
        self.owner_percentage_input.fill(str(percentage))

    def confirm_only_owner(self) -> None:
        if not self.only_owner_checkbox.is_checked():
            click_with_fallback(self.only_owner_checkbox)

    def confirm_multiple_owners(self) -> None:
        if self.only_owner_checkbox.is_checked():
            click_with_fallback(self.only_owner_checkbox)
        if not self.multi_owner_consent_checkbox.is_checked():
            click_with_fallback(self.multi_owner_consent_checkbox)

    def click_continue(self) -> None:
        click_with_fallback(self.continue_button.first)
