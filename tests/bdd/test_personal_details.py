from playwright.sync_api import Page, expect
from pytest_bdd import parsers, scenarios, then, when

from obwizard.config import WizardCfg
from obwizard.pages import PersonalDetailsPage

scenarios("../../features/personal_details.feature")


@when("the applicant leaves both names empty")
def _(page: Page, wizard_cfg: WizardCfg):
    """the applicant leaves both names empty."""
    details = PersonalDetailsPage(page, wizard_cfg)
    details.first_name_input.click()
    details.first_name_input.clear()
    details.last_name_input.click()
    details.last_name_input.clear()
    details.click_outside()


@then(parsers.parse('the first name error says "{message}"'))
def _(page: Page, wizard_cfg: WizardCfg, message: str):
    """the first name error says "<message>"."""
    expect(PersonalDetailsPage(page, wizard_cfg).first_name_error).to_contain_text(message)


@then(parsers.parse('the last name error says "{message}"'))
def _(page: Page, wizard_cfg: WizardCfg, message: str):
    """the last name error says "<message>"."""
    expect(PersonalDetailsPage(page, wizard_cfg).last_name_error).to_contain_text(message)
