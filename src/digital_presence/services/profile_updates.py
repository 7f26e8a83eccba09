"""
Profile Update Helpers - Build the next profile snapshot for the host to persist.

The engine owns no storage. These helpers only compute the updated profile
the host sends to its profile store, after which the dashboard is
recomputed from whatever the store confirms. Inputs are never mutated.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from digital_presence.contracts.profile import BusinessProfile, ProfileInput, coerce_profile
from digital_presence.contracts.wizard import (
    WIZARD_COMPLETE,
    get_next_step_id,
    get_wizard_step,
    order_step_ids,
)

logger = logging.getLogger(__name__)


class InvalidStepError(ValueError):
    """Raised when a write names a step outside the wizard vocabulary."""
    pass


def _require_profile(profile: ProfileInput) -> BusinessProfile:
    snapshot = coerce_profile(profile)
    if snapshot is None:
        raise ValueError("A business profile is required to record progress")
    return snapshot


def to_record(profile: BusinessProfile, json_safe: bool = False) -> Dict[str, Any]:
    """
    Serialize a profile back to its stored camelCase shape.

    Only keys present on the stored record (or set by an update helper) are
    emitted, so opaque fields round-trip unchanged.
    """
    return profile.model_dump(
        by_alias=True,
        exclude_unset=True,
        mode="json" if json_safe else "python",
    )


def _rebuild(
    profile: BusinessProfile,
    progress_changes: Dict[str, Any],
    completed_steps: Optional[list] = None,
) -> BusinessProfile:
    record = to_record(profile)
    progress = profile.wizard_progress.model_dump(by_alias=True, exclude_unset=True)
    progress.update(progress_changes)
    record["wizardProgress"] = progress
    if completed_steps is not None:
        record["completedSteps"] = completed_steps
    return BusinessProfile.model_validate(record)


def set_action_completed(profile: ProfileInput, action_id: str, completed: bool) -> BusinessProfile:
    """
    Mark an action item as completed or not completed.

    Adding an ID that is already present, or removing one that is absent,
    leaves completedActions unchanged.
    """
    snapshot = _require_profile(profile)
    if not isinstance(action_id, str) or not action_id:
        raise ValueError(f"Invalid action id: {action_id!r}")

    actions = list(snapshot.wizard_progress.completed_actions)
    if completed and action_id not in actions:
        actions.append(action_id)
    elif not completed and action_id in actions:
        actions.remove(action_id)
    else:
        logger.debug(f"Action {action_id!r} already {'completed' if completed else 'open'}")

    return _rebuild(snapshot, {"completedActions": actions})


def set_current_step(profile: ProfileInput, step_id: str) -> BusinessProfile:
    """Record which wizard step the user is working on."""
    snapshot = _require_profile(profile)
    step_id = getattr(step_id, "value", step_id)
    if step_id != WIZARD_COMPLETE and get_wizard_step(step_id) is None:
        raise InvalidStepError(f"Unknown wizard step: {step_id!r}")
    return _rebuild(snapshot, {"currentStep": step_id})


def complete_wizard_step(
    profile: ProfileInput,
    step_id: str,
    preferences: Optional[Mapping] = None,
) -> BusinessProfile:
    """
    Record a finished wizard step.

    The step is added to completedSteps, currentStep moves on to the next
    step ("complete" after launch), and the submitted form answers are
    stored under the step's preferences key.
    """
    snapshot = _require_profile(profile)
    step = get_wizard_step(step_id)
    if step is None:
        raise InvalidStepError(f"Unknown wizard step: {step_id!r}")

    completed_steps = order_step_ids([*snapshot.completed_steps, step.id.value])
    changes: Dict[str, Any] = {
        "currentStep": get_next_step_id(step.id.value) or WIZARD_COMPLETE,
    }
    if preferences is not None:
        changes[step.preferences_key] = dict(preferences)

    logger.info(f"Profile {snapshot.id!r}: step {step.id.value!r} completed")
    return _rebuild(snapshot, changes, completed_steps=completed_steps)
