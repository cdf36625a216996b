"""ABOUTME: Value objects and enums for the onboarding wizard
ABOUTME: Wizard steps with their URL paths, business types, plans and billing periods"""

from enum import Enum


class WizardStep(Enum):
    WELCOME = "/welcome"
    EMAIL_VERIFICATION = "/email-verification"
    PERSONAL_DETAILS = "/personal-details"
    PHONE = "/phone"
    IDENTITY = "/identity"
    HOME_ADDRESS = "/home-address"
    BUSINESS_TYPE = "/business-type"
    INDUSTRY = "/industry"
    KNOW_YOUR_BUSINESS = "/know-your-business"
    BUSINESS_ADDRESS = "/business-address"
    OWNERS_CENTER = "/owners-center"
    PLAN_SELECTION = "/plan-selection"

    @property
    def path(self) -> str:
        return self.value

    @property
    def url_pattern(self) -> str:
        """Glob for page.wait_for_url, tolerant of query strings and trailing slashes."""
        return f"**{self.value}**"

    @classmethod
    def for_url(cls, url: str) -> "WizardStep | None":
        # longest match first, so /business-address never resolves to something shorter
        path = url.split("?", 1)[0].split("#", 1)[0]
        matches = [step for step in cls if step.value in path]
        if not matches:
            return None
        return max(matches, key=lambda step: len(step.value))


# where the wizard may go once a plan has been picked
POST_PLAN_SELECTION_PATHS = ("/review-details", "/confirmation", "/debit-card-name", "/success")


class BusinessType(Enum):
    CORPORATION = "corporation"
    PARTNERSHIP = "partnership"
    LLC = "llc"
    SOLE_PROPRIETORSHIP = "soleProprietorship"


class BusinessSubType(Enum):
    S_CORP = "s_corp"
    C_CORP = "c_corp"
    LLC = "llc"
    MULTI_MEMBER_LLC = "mmllc"
    GENERAL_PARTNERSHIP = "general_partnership"
    LLP = "llp"
    DBA = "dba"
    SSN = "ssn"

    @property
    def parent(self) -> BusinessType:
        return _SUB_TYPE_PARENTS[self]


_SUB_TYPE_PARENTS = {
    BusinessSubType.S_CORP: BusinessType.CORPORATION,
    BusinessSubType.C_CORP: BusinessType.CORPORATION,
    BusinessSubType.LLC: BusinessType.LLC,
    BusinessSubType.MULTI_MEMBER_LLC: BusinessType.LLC,
    BusinessSubType.GENERAL_PARTNERSHIP: BusinessType.PARTNERSHIP,
    BusinessSubType.LLP: BusinessType.PARTNERSHIP,
    BusinessSubType.DBA: BusinessType.SOLE_PROPRIETORSHIP,
    BusinessSubType.SSN: BusinessType.SOLE_PROPRIETORSHIP,
}


class Plan(Enum):
    BASIC = "Basic"
    PRO = "Pro"
    PREMIUM = "Premium"

    @classmethod
    def from_label(cls, label: str) -> "Plan":
        for plan in cls:
            if plan.value.lower() == label.strip().lower():
                return plan
        raise ValueError(f"Unknown plan '{label}'")


class BillingPeriod(Enum):
    MONTHLY = "Monthly"
    ANNUAL = "Annual"

    @classmethod
    def from_label(cls, label: str) -> "BillingPeriod":
        for period in cls:
            if period.value.lower() == label.strip().lower():
                return period
        raise ValueError(f"Unknown billing period '{label}'")
