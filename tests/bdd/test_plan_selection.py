from pytest_bdd import parsers, scenarios, when

from obwizard.domain.value_objects import BillingPeriod, Plan
from obwizard.service_layer.onboarding import WizardRun, choose_plan

scenarios("../../features/plan_selection.feature")


@when(parsers.parse('the applicant picks the "{plan}" plan billed "{period}"'))
def _(wizard_run: WizardRun, plan: str, period: str):
    """the applicant picks the "<plan>" plan billed "<period>"."""
    wizard_run.applicant.plan = Plan.from_label(plan)
    wizard_run.applicant.billing_period = BillingPeriod.from_label(period)
    choose_plan(wizard_run)
