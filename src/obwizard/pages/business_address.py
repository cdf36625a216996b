from playwright.sync_api import Page

from obwizard.config import WizardCfg
from obwizard.domain.value_objects import WizardStep
from obwizard.pages.home_address import HomeAddressPage


class BusinessAddressPage(HomeAddressPage):
    """Same fields as the home address, plus a shortcut to reuse it."""

    step = WizardStep.BUSINESS_ADDRESS

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.same_as_home_checkbox = self.page.locator("#BUSINESS_ADDRESS_SAME_AS_PRIMARY")

    def use_home_address(self) -> None:
        self.same_as_home_checkbox.check()
