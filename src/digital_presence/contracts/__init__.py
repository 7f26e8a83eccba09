"""
Contracts for the Digital Presence engine.

These schemas define the shape of profile snapshots read by the engine and
of the view models it produces.
"""

from .dashboard import (
    ActionItem,
    ActionPriority,
    ProgressSummary,
    StepProgress,
    StepStatus,
)
from .profile import BusinessProfile, WizardProgress, coerce_profile
from .wizard import (
    TOTAL_WIZARD_STEPS,
    WIZARD_COMPLETE,
    WIZARD_STEP_IDS,
    WIZARD_STEPS,
    WizardStep,
    WizardStepId,
    get_next_step_id,
    get_wizard_step,
)

__all__ = [
    "ActionItem",
    "ActionPriority",
    "ProgressSummary",
    "StepProgress",
    "StepStatus",
    "BusinessProfile",
    "WizardProgress",
    "coerce_profile",
    "TOTAL_WIZARD_STEPS",
    "WIZARD_COMPLETE",
    "WIZARD_STEP_IDS",
    "WIZARD_STEPS",
    "WizardStep",
    "WizardStepId",
    "get_next_step_id",
    "get_wizard_step",
]
