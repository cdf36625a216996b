from obwizard.domain.value_objects import WizardStep
from obwizard.service_layer.onboarding import HAPPY_PATH, WizardRun

WIZARD_ORDER = list(WizardStep)


def steps_before(step: WizardStep):
    """The wizard actions that have to run to arrive at `step`.

    HAPPY_PATH[i] completes WIZARD_ORDER[i], so reaching a step means running
    everything before its own action.
    """
    return HAPPY_PATH[: WIZARD_ORDER.index(step)]


def action_for(step: WizardStep):
    return HAPPY_PATH[WIZARD_ORDER.index(step)]


def reach_step(run: WizardRun, step: WizardStep) -> None:
    if step is WizardStep.WELCOME:
        run.page.goto(run.wizard_cfg.url_for(step.path))
        return
    for action in steps_before(step):
        action(run)
