from playwright.sync_api import Locator, Page

from obwizard.adapters.locators import click_with_fallback
from obwizard.config import WizardCfg
from obwizard.domain.value_objects import POST_PLAN_SELECTION_PATHS, BillingPeriod, Plan, WizardStep
from obwizard.pages.base import WizardPage


class PlanSelectionPage(WizardPage):
    step = WizardStep.PLAN_SELECTION

    def __init__(self, page: Page, wizard_cfg: WizardCfg | None = None) -> None:
        super().__init__(page, wizard_cfg)
        self.select_plan_button = self.page.locator('#btn-select-plan, button:has-text("Select Plan")').first
        self.try_for_free_button = self.page.locator(
            '#btn-try-business-build, button:has-text("Try 30 Days For Free")'
        ).first
        # unchecked is monthly, checked is annual
        self.billing_toggle = self.page.get_by_role("checkbox").first
        self.annual_plans_text = self.page.get_by_text("Annual Plans").first

    def plan_card(self, plan: Plan) -> Locator:
        return self.page.locator(f'button:has-text("{plan.value}")').first

    def select_plan(self, plan: Plan) -> None:
        click_with_fallback(self.plan_card(plan))
        click_with_fallback(self.select_plan_button)
        click_with_fallback(self.try_for_free_button)

    def select_billing_period(self, period: BillingPeriod) -> None:
        self.billing_toggle.set_checked(period is BillingPeriod.ANNUAL, force=True)

    def left_plan_selection(self) -> bool:
        return any(path in self.page.url for path in POST_PLAN_SELECTION_PATHS)
