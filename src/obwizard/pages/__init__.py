"""ABOUTME: Page objects for the onboarding wizard, one per step
ABOUTME: Locators as attributes plus small fill and click helpers, no assertions"""

from obwizard.pages.base import WizardPage
from obwizard.pages.business_address import BusinessAddressPage
from obwizard.pages.business_type import BusinessTypePage
from obwizard.pages.email_verification import EmailVerificationPage
from obwizard.pages.home_address import HomeAddressPage
from obwizard.pages.identity import IdentityPage
from obwizard.pages.industry import IndustryPage
from obwizard.pages.know_your_business import KnowYourBusinessPage
from obwizard.pages.owners_center import OwnersCenterPage
from obwizard.pages.personal_details import PersonalDetailsPage
from obwizard.pages.phone import PhonePage
from obwizard.pages.plan_selection import PlanSelectionPage
from obwizard.pages.welcome import WelcomePage

__all__ = [
    "BusinessAddressPage",
    "BusinessTypePage",
    "EmailVerificationPage",
    "HomeAddressPage",
    "IdentityPage",
    "IndustryPage",
    "KnowYourBusinessPage",
    "OwnersCenterPage",
    "PersonalDetailsPage",
    "PhonePage",
    "PlanSelectionPage",
    "WelcomePage",
    "WizardPage",
]
