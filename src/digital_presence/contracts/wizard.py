"""
Business Wizard Step Definitions - Fixed five-step development workflow.

The declaration order of the steps is the order the wizard walks through
them and the order the dashboard lists them in.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WizardStepId(str, Enum):
    """Identifiers of the business development wizard steps."""
    BUSINESS_INFO = "business-info"
    BRANDING = "branding"
    WEBSITE = "website"
    MARKETING = "marketing"
    LAUNCH = "launch"


# Written to wizardProgress.currentStep once the launch step is scheduled.
WIZARD_COMPLETE = "complete"


class WizardStep(BaseModel):
    """Static description of a wizard step."""

    id: WizardStepId = Field(..., description="Step identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Short description")
    route: str = Field(..., description="Route of the wizard screen for this step")
    preferences_key: str = Field(..., description="wizardProgress key holding the step's form answers")

    model_config = ConfigDict(frozen=True)


WIZARD_STEPS: tuple[WizardStep, ...] = (
    WizardStep(
        id=WizardStepId.BUSINESS_INFO,
        name="Define Your Business",
        description="Set up basic business information",
        route="/business-wizard",
        preferences_key="businessInfoPreferences",
    ),
    WizardStep(
        id=WizardStepId.BRANDING,
        name="Develop Your Brand",
        description="Create your brand identity",
        route="/business-wizard?step=branding",
        preferences_key="brandingPreferences",
    ),
    WizardStep(
        id=WizardStepId.WEBSITE,
        name="Website Setup",
        description="Configure your website preferences",
        route="/business-wizard?step=website",
        preferences_key="websitePreferences",
    ),
    WizardStep(
        id=WizardStepId.MARKETING,
        name="Marketing Strategy",
        description="Plan your marketing approach",
        route="/business-wizard?step=marketing",
        preferences_key="marketingPreferences",
    ),
    WizardStep(
        id=WizardStepId.LAUNCH,
        name="Launch & Grow",
        description="Prepare for business launch",
        route="/business-wizard?step=launch",
        preferences_key="launchPreferences",
    ),
)

WIZARD_STEP_IDS: tuple[str, ...] = tuple(step.id.value for step in WIZARD_STEPS)
TOTAL_WIZARD_STEPS = len(WIZARD_STEPS)

_STEPS_BY_ID: Dict[str, WizardStep] = {step.id.value: step for step in WIZARD_STEPS}


def is_wizard_step_id(value: object) -> bool:
    """Check whether a value names one of the wizard steps."""
    if isinstance(value, WizardStepId):
        return True
    return isinstance(value, str) and value in _STEPS_BY_ID


def get_wizard_step(step_id: str) -> Optional[WizardStep]:
    """Get a wizard step by ID, or None for an unknown ID."""
    if isinstance(step_id, WizardStepId):
        step_id = step_id.value
    if not isinstance(step_id, str):
        return None
    return _STEPS_BY_ID.get(step_id)


def get_next_step_id(step_id: str) -> Optional[str]:
    """Get the ID of the step following step_id, or None after the last step."""
    step = get_wizard_step(step_id)
    if step is None:
        return None
    index = WIZARD_STEP_IDS.index(step.id.value)
    if index + 1 >= TOTAL_WIZARD_STEPS:
        return None
    return WIZARD_STEP_IDS[index + 1]


def order_step_ids(step_ids) -> List[str]:
    """Return the known step IDs among step_ids, once each, in wizard order."""
    wanted = {s.value if isinstance(s, WizardStepId) else s for s in step_ids}
    return [step_id for step_id in WIZARD_STEP_IDS if step_id in wanted]
