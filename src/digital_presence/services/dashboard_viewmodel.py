"""
Dashboard ViewModel - Progress tracker and recommended actions for one profile.

The viewmodel holds the current profile snapshot and recomputes progress
and actions from it. Writes go through the host's persistence callback;
the viewmodel never talks to storage itself.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from digital_presence.contracts.dashboard import ActionItem, ProgressSummary
from digital_presence.contracts.profile import BusinessProfile, ProfileInput, coerce_profile

from .action_service import compute_actions
from .profile_updates import set_action_completed
from .progress_service import compute_progress

logger = logging.getLogger(__name__)


@dataclass
class DashboardViewModel:
    """ViewModel for the business development dashboard."""

    # Current profile snapshot (None until the user starts the wizard)
    profile: Optional[BusinessProfile] = None

    # Host persistence: receives the updated profile, returns the stored one
    # (or None to keep the submitted snapshot)
    on_profile_update: Optional[Callable[[BusinessProfile], Optional[BusinessProfile]]] = None

    # Callbacks for UI updates
    on_state_changed: Optional[Callable[["DashboardViewModel"], None]] = None
    on_error: Optional[Callable[[str, Dict[str, Any]], None]] = None

    progress: ProgressSummary = field(init=False)
    actions: List[ActionItem] = field(init=False)

    def __post_init__(self):
        self.profile = coerce_profile(self.profile)
        self._recompute()

    @classmethod
    def from_record(cls, record: ProfileInput, **callbacks) -> "DashboardViewModel":
        """Create viewmodel from a stored profile record."""
        return cls(profile=coerce_profile(record), **callbacks)

    def _recompute(self) -> None:
        self.progress = compute_progress(self.profile)
        self.actions = compute_actions(self.profile)

    def _notify_state_changed(self) -> None:
        if self.on_state_changed:
            self.on_state_changed(self)

    def update_profile(self, profile: ProfileInput) -> None:
        """Replace the snapshot after the host reloaded the profile."""
        self.profile = coerce_profile(profile)
        self._recompute()
        self._notify_state_changed()

    def toggle_action(self, action_id: str, completed: bool) -> bool:
        """
        Mark an action item as completed or open.

        Returns:
            bool: True if the change was persisted, False otherwise
        """
        if self.profile is None:
            logger.warning(f"Cannot toggle action {action_id!r} without a business profile")
            return False

        try:
            updated = set_action_completed(self.profile, action_id, completed)
            if self.on_profile_update:
                stored = self.on_profile_update(updated)
                if stored is not None:
                    updated = coerce_profile(stored)
        except Exception as e:
            error_msg = f"Failed to update action {action_id!r}: {e}"
            logger.exception(error_msg)
            if self.on_error:
                self.on_error(error_msg, {"action_id": action_id, "completed": completed, "exception": str(e)})
            return False

        self.profile = updated
        self._recompute()
        self._notify_state_changed()
        logger.debug(f"Action {action_id!r} set to completed={completed}")
        return True

    @property
    def has_profile(self) -> bool:
        return self.profile is not None

    @property
    def pending_actions(self) -> List[ActionItem]:
        return [a for a in self.actions if not a.completed]

    def snapshot(self) -> Dict[str, Any]:
        """JSON-serializable view of the dashboard."""
        data = self.progress.to_dict()
        data["profileId"] = self.profile.id if self.profile is not None else None
        data["actions"] = [a.to_dict() for a in self.actions]
        return data
