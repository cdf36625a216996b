from playwright.sync_api import Page, expect
from pytest_bdd import parsers, scenarios, then, when

from obwizard.config import WizardCfg
from obwizard.domain.applicant import Applicant
from obwizard.pages import KnowYourBusinessPage

scenarios("../../features/know_your_business.feature")


@when(parsers.parse('the applicant submits the business with the EIN "{ein}"'))
def _(page: Page, wizard_cfg: WizardCfg, applicant: Applicant, ein: str):
    """the applicant submits the business with the EIN "<ein>"."""
    kyb = KnowYourBusinessPage(page, wizard_cfg)
    kyb.fill_business_name(applicant.business_name)
    kyb.fill_ein(ein)
    kyb.select_registered_state(applicant.registered_state)
    kyb.accept_agreement()
    kyb.click_continue()


@then("the EIN error is shown")
def _(page: Page, wizard_cfg: WizardCfg):
    """the EIN error is shown."""
    expect(KnowYourBusinessPage(page, wizard_cfg).ein_error.first).to_be_visible()
