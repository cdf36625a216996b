"""Unit tests for the wizard vocabulary."""

import pytest

from obwizard.domain.value_objects import BillingPeriod, BusinessSubType, BusinessType, Plan, WizardStep


class TestWizardStep:
    def test_url_pattern(self):
        assert WizardStep.PHONE.url_pattern == "**/phone**"

    @pytest.mark.parametrize(
        ("url", "step"),
        [
            ("https://onboarding.example.com/welcome", WizardStep.WELCOME),
            ("https://onboarding.example.com/email-verification?ref=1", WizardStep.EMAIL_VERIFICATION),
            ("https://onboarding.example.com/business-address", WizardStep.BUSINESS_ADDRESS),
            ("https://onboarding.example.com/home-address/", WizardStep.HOME_ADDRESS),
            ("https://onboarding.example.com/plan-selection#top", WizardStep.PLAN_SELECTION),
        ],
    )
    def test_for_url(self, url, step):
        assert WizardStep.for_url(url) is step

    def test_for_url_unknown(self):
        assert WizardStep.for_url("https://onboarding.example.com/success") is None

    def test_paths_are_unique(self):
        assert len({step.path for step in WizardStep}) == len(WizardStep)


class TestBusinessTypes:
    @pytest.mark.parametrize(
        ("sub_type", "parent"),
        [
            (BusinessSubType.S_CORP, BusinessType.CORPORATION),
            (BusinessSubType.C_CORP, BusinessType.CORPORATION),
            (BusinessSubType.MULTI_MEMBER_LLC, BusinessType.LLC),
            (BusinessSubType.LLP, BusinessType.PARTNERSHIP),
            (BusinessSubType.DBA, BusinessType.SOLE_PROPRIETORSHIP),
        ],
    )
    def test_parent(self, sub_type, parent):
        assert sub_type.parent is parent

    def test_every_sub_type_has_a_parent(self):
        for sub_type in BusinessSubType:
            assert isinstance(sub_type.parent, BusinessType)


class TestPlans:
    def test_plan_from_label(self):
        assert Plan.from_label(" premium ") is Plan.PREMIUM

    def test_unknown_plan(self):
        with pytest.raises(ValueError, match="Gold"):
            Plan.from_label("Gold")

    def test_billing_period_from_label(self):
        assert BillingPeriod.from_label("Annual") is BillingPeriod.ANNUAL

    def test_unknown_billing_period(self):
        with pytest.raises(ValueError, match="Weekly"):
            BillingPeriod.from_label("Weekly")
