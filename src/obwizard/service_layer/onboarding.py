"""ABOUTME: One function per wizard step: fill the step, continue, wait for the next one
ABOUTME: Journeys list the steps they run; HAPPY_PATH has all of them in wizard order"""

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from obwizard.bootstrap import MfaCodeFetcher
from obwizard.config import WizardCfg
from obwizard.domain.applicant import Applicant, random_ein
from obwizard.domain.value_objects import POST_PLAN_SELECTION_PATHS
from obwizard.pages import (
    BusinessAddressPage,
    BusinessTypePage,
    EmailVerificationPage,
    HomeAddressPage,
    IdentityPage,
    IndustryPage,
    KnowYourBusinessPage,
    OwnersCenterPage,
    PersonalDetailsPage,
    PhonePage,
    PlanSelectionPage,
    WelcomePage,
)
from obwizard.service_layer.exceptions import StepNotReached

logger = logging.getLogger(__name__)

MAX_EIN_ATTEMPTS = 5


@dataclass
class WizardRun:
    """Everything a step needs: the browser tab, who is applying and how to get the emailed code."""

    page: Page
    applicant: Applicant
    fetch_code: MfaCodeFetcher
    wizard_cfg: WizardCfg = field(default_factory=WizardCfg.from_env)
    rng: random.Random = field(default_factory=random.Random)


def start_application(run: WizardRun) -> None:
    welcome = WelcomePage(run.page, run.wizard_cfg)
    welcome.goto()
    welcome.fill_email(run.applicant.email)
    welcome.fill_password(run.applicant.password)
    welcome.click_get_started()
    EmailVerificationPage(run.page, run.wizard_cfg).wait_until_loaded()


def verify_email(run: WizardRun) -> None:
    verification = EmailVerificationPage(run.page, run.wizard_cfg)
    verification.wait_until_loaded()
    code = run.fetch_code(run.applicant.email_prefix)
    verification.enter_code(code)
    # the form submits itself once the last digit is in
    PersonalDetailsPage(run.page, run.wizard_cfg).wait_until_loaded()


def submit_personal_details(run: WizardRun) -> None:
    details = PersonalDetailsPage(run.page, run.wizard_cfg)
    details.fill_names(run.applicant.first_name, run.applicant.last_name)
    details.click_continue()
    PhonePage(run.page, run.wizard_cfg).wait_until_loaded()


def submit_phone(run: WizardRun) -> None:
    phone = PhonePage(run.page, run.wizard_cfg)
    phone.fill_phone_number(run.applicant.phone)
    phone.click_continue()
    IdentityPage(run.page, run.wizard_cfg).wait_until_loaded()


def submit_identity(run: WizardRun) -> None:
    identity = IdentityPage(run.page, run.wizard_cfg)
    identity.fill_identity(run.applicant.ssn, run.applicant.date_of_birth)
    identity.click_continue()
    HomeAddressPage(run.page, run.wizard_cfg).wait_until_loaded()


def submit_home_address(run: WizardRun) -> None:
    home = HomeAddressPage(run.page, run.wizard_cfg)
    home.fill_address(run.applicant.home_address)
    home.click_continue()
    BusinessTypePage(run.page, run.wizard_cfg).wait_until_loaded()


def choose_business_type(run: WizardRun) -> None:
    applicant = run.applicant
    logger.info("Choosing business type %s, %s", applicant.business_type.value, applicant.business_sub_type.value)
    business_type = BusinessTypePage(run.page, run.wizard_cfg)
    business_type.choose(run.applicant.business_sub_type)
    business_type.click_continue()
    IndustryPage(run.page, run.wizard_cfg).wait_until_loaded()


def choose_industry(run: WizardRun) -> None:
    industry = IndustryPage(run.page, run.wizard_cfg)
    industry.select_industry(run.applicant.industry)
    industry.select_sub_industry(run.applicant.sub_industry)
    industry.click_continue()
    KnowYourBusinessPage(run.page, run.wizard_cfg).wait_until_loaded()


def submit_know_your_business(run: WizardRun) -> None:
    """Fill the business details, trying fresh EINs while the IRS check rejects them.

    The integration environment checks EINs against the IRS, so a random one is
    often refused. After MAX_EIN_ATTEMPTS refusals we carry on with the last one
    and let the next step decide.
    """
    kyb = KnowYourBusinessPage(run.page, run.wizard_cfg)
    kyb.fill_business_name(run.applicant.business_name)
    kyb.fill_ein(run.applicant.ein)
    kyb.select_registered_state(run.applicant.registered_state)
    kyb.accept_agreement()
    kyb.click_continue()

    attempts = 1
    while kyb.has_ein_error() and attempts < MAX_EIN_ATTEMPTS:
        attempts += 1
        run.applicant.ein = random_ein(run.rng)
        logger.info("EIN was refused, trying %s (attempt %d of %d)", run.applicant.ein, attempts, MAX_EIN_ATTEMPTS)
        kyb.fill_ein(run.applicant.ein)
        kyb.click_continue()

    if attempts >= MAX_EIN_ATTEMPTS and kyb.has_ein_error():
        logger.warning("EIN still refused after %d attempts, continuing anyway", attempts)
        return
    BusinessAddressPage(run.page, run.wizard_cfg).wait_until_loaded()


def submit_business_address(run: WizardRun) -> None:
    business_address = BusinessAddressPage(run.page, run.wizard_cfg)
    business_address.fill_address(run.applicant.home_address)
    business_address.click_continue()
    OwnersCenterPage(run.page, run.wizard_cfg).wait_until_loaded()


def submit_owners_center(run: WizardRun) -> None:
    owners = OwnersCenterPage(run.page, run.wizard_cfg)
    owners.fill_ownership(run.applicant.ownership_percentage)
    owners.confirm_only_owner()
    owners.click_continue()
    PlanSelectionPage(run.page, run.wizard_cfg).wait_until_loaded()


def choose_plan(run: WizardRun) -> None:
    plans = PlanSelectionPage(run.page, run.wizard_cfg)
    plans.select_billing_period(run.applicant.billing_period)
    plans.select_plan(run.applicant.plan)
    try:
        run.page.wait_for_url(
            lambda url: any(path in url for path in POST_PLAN_SELECTION_PATHS),
            timeout=run.wizard_cfg.default_timeout_ms,
        )
    except PlaywrightError as error:
        raise StepNotReached("after plan selection", run.page.url) from error


WizardAction = Callable[[WizardRun], None]

HAPPY_PATH: list[WizardAction] = [
    start_application,
    verify_email,
    submit_personal_details,
    submit_phone,
    submit_identity,
    submit_home_address,
    choose_business_type,
    choose_industry,
    submit_know_your_business,
    submit_business_address,
    submit_owners_center,
    choose_plan,
]
