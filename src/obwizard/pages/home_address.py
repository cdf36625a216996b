from playwright.sync_api import Page

from obwizard.adapters.locators import click_with_fallback, first_visible
from obwizard.config import WizardCfg
from obwizard.domain.applicant import Address
from obwizard.domain.value_objects import WizardStep
from obwizard.pages.base import WizardPage


class HomeAddressPage(WizardPage):
    step = WizardStep.HOME_ADDRESS

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.street_address_input = self.page.locator("#LINE1")
        self.apartment_input = self.page.locator("#APARTMENT")
        self.city_input = self.page.locator("#CITY")
        self.state_dropdown = self.page.locator("#dropdown-item-")
        self.zip_code_input = self.page.locator("#ZIP")
        self.continue_button = self.page.locator('button:has-text("Continue"), #formSubmitButton')
        self.street_address_error = self.page.locator("#LINE1-error-container")
        self.city_error = self.page.locator("#CITY-error-container")
        self.zip_code_error = self.page.locator("#ZIP-error-container")
        self.unsupported_address_error = self.page.get_by_text("Unfortunately, Lili cannot")

    def select_state(self, state: str) -> None:
        self.state_dropdown.click()
        # the abbreviation matches several nested divs, the fourth is the option itself
        option = first_visible(
            [
                self.page.locator("div").filter(has_text=state).nth(3),
                self.page.locator(f"li:has-text('{state}')"),
                self.page.get_by_text(state, exact=True),
            ],
            timeout_ms=self.cfg.default_timeout_ms,
        )
        click_with_fallback(option)

    def fill_address(self, address: Address) -> None:
        self.street_address_input.fill(address.line1)
        self.city_input.fill(address.city)
        self.select_state(address.state)
        self.zip_code_input.fill(address.zip_code)

    def click_continue(self) -> None:
        click_with_fallback(self.continue_button.first)
