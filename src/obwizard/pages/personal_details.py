from playwright.sync_api import Page

from obwizard.config import WizardCfg
from obwizard.domain.value_objects import WizardStep
from obwizard.pages.base import WizardPage


class PersonalDetailsPage(WizardPage):
    step = WizardStep.PERSONAL_DETAILS

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.first_name_input = self.page.locator("#FIRST_NAME")
        self.last_name_input = self.page.locator("#LAST_NAME")
        self.continue_button = self.page.get_by_role("button", name="Continue")
        self.first_name_error = self.page.locator("#FIRST_NAME-error-container")
        self.last_name_error = self.page.locator("#LAST_NAME-error-container")

    def fill_names(self, first_name: str, last_name: str) -> None:
        self.first_name_input.fill(first_name)
        self.last_name_input.fill(last_name)

    def click_continue(self) -> None:
        self.continue_button.click()
