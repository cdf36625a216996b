"""ABOUTME: Generated applicant data for driving the onboarding wizard
ABOUTME: Each run gets a fresh disposable inbox prefix, phone, SSN and business name"""

import random
from dataclasses import dataclass, field

from obwizard.domain.value_objects import BillingPeriod, BusinessSubType, BusinessType, Plan

INBOX_DOMAIN = "mailforspam.com"
DEFAULT_PASSWORD = "Password123!"

BUSINESS_NAMES = (
    "Acme Solutions",
    "Global Dynamics",
    "Premier Services",
    "Elite Enterprises",
    "Innovation Hub",
    "Strategic Partners",
    "Advanced Systems",
    "Creative Solutions",
    "Professional Group",
    "Excellence Corp",
)

# samples the welcome page must reject
INVALID_EMAIL = "invalid-email"
WEAK_PASSWORD = "123"


def _digits(rng: random.Random, count: int) -> str:
    return "".join(str(rng.randint(0, 9)) for _ in range(count))


def random_email_prefix(rng: random.Random) -> str:
    return f"Filler{rng.randint(1000, 9999)}"


def random_phone(rng: random.Random) -> str:
    return f"+1 212 459{_digits(rng, 4)}"


def random_ssn(rng: random.Random) -> str:
    return f"231-{_digits(rng, 2)}-{_digits(rng, 4)}"


def random_ein(rng: random.Random | None = None) -> str:
    rng = rng or random.Random()
    return f"{_digits(rng, 2)}-{_digits(rng, 7)}"


@dataclass(kw_only=True)
class Address:
    line1: str = "123 Main St"
    city: str = "New York"
    state: str = "NY"
    zip_code: str = "10001"


@dataclass(kw_only=True)
class Applicant:
    email_prefix: str
    phone: str
    ssn: str
    business_name: str
    ein: str
    password: str = DEFAULT_PASSWORD
    first_name: str = "John"
    last_name: str = "Doe"
    date_of_birth: str = "01/01/1991"
    home_address: Address = field(default_factory=Address)
    industry: str = "Art"
    sub_industry: str = "Painter"
    business_sub_type: BusinessSubType = BusinessSubType.S_CORP
    registered_state: str = "New York"
    ownership_percentage: int = 100
    plan: Plan = Plan.BASIC
    billing_period: BillingPeriod = BillingPeriod.MONTHLY

    @property
    def email(self) -> str:
        return f"{self.email_prefix}@{INBOX_DOMAIN}"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def business_type(self) -> BusinessType:
        return self.business_sub_type.parent

    @classmethod
    def generate(cls, rng: random.Random | None = None) -> "Applicant":
        rng = rng or random.Random()
        return cls(
            email_prefix=random_email_prefix(rng),
            phone=random_phone(rng),
            ssn=random_ssn(rng),
            business_name=rng.choice(BUSINESS_NAMES),
            ein=random_ein(rng),
        )
