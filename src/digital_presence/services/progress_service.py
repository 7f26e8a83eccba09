"""
Progress Service - Wizard step status and completion percentage.

Pure projection of a profile snapshot. The engine never advances steps
itself; transitions happen in the profile store and are re-derived here.
"""

import logging
from typing import Optional

from digital_presence.contracts.dashboard import ProgressSummary, StepProgress, StepStatus
from digital_presence.contracts.profile import BusinessProfile, ProfileInput, coerce_profile
from digital_presence.contracts.wizard import TOTAL_WIZARD_STEPS, WIZARD_STEPS

logger = logging.getLogger(__name__)


def completion_percent(completed_count: int, total: int = TOTAL_WIZARD_STEPS) -> int:
    """
    Whole-number percentage of completed steps, rounded half up.

    Integer arithmetic keeps the result exact; the value is clamped to
    [0, 100].
    """
    if total <= 0:
        return 0
    percent = (200 * completed_count + total) // (2 * total)
    return min(max(percent, 0), 100)


def get_step_status(profile: BusinessProfile, step_id: str) -> StepStatus:
    """Derive the status of one wizard step from a profile."""
    if profile.has_completed(step_id):
        return StepStatus.COMPLETED
    if profile.current_step == step_id:
        return StepStatus.IN_PROGRESS
    return StepStatus.NOT_STARTED


def compute_progress(profile: ProfileInput) -> ProgressSummary:
    """
    Compute per-step status and overall completion for a profile.

    Args:
        profile: Profile snapshot, raw stored record, or None

    Returns:
        ProgressSummary with all five steps in wizard order. Without a
        profile every step is not started and the percentage is 0.
    """
    snapshot: Optional[BusinessProfile] = coerce_profile(profile)
    if snapshot is None:
        return ProgressSummary(
            steps=[StepProgress(step=step, status=StepStatus.NOT_STARTED) for step in WIZARD_STEPS],
            percent=0,
        )

    steps = [
        StepProgress(step=step, status=get_step_status(snapshot, step.id.value))
        for step in WIZARD_STEPS
    ]
    percent = completion_percent(len(snapshot.completed_steps))
    logger.debug(f"Profile {snapshot.id!r}: {len(snapshot.completed_steps)}/{TOTAL_WIZARD_STEPS} steps, {percent}%")
    return ProgressSummary(steps=steps, percent=percent)
