from pytest_bdd import parsers, scenarios, when

from obwizard.domain.value_objects import BusinessSubType
from obwizard.service_layer.onboarding import WizardRun, choose_business_type

scenarios("../../features/business_type.feature")


@when(parsers.parse('the applicant chooses the "{sub_type}" business sub type'))
def _(wizard_run: WizardRun, sub_type: str):
    """the applicant chooses the "<sub_type>" business sub type."""
    wizard_run.applicant.business_sub_type = BusinessSubType(sub_type)
    choose_business_type(wizard_run)
