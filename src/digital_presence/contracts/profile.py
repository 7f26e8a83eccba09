"""
Business Profile Contract - Read model of a business profile snapshot.

The profile is owned by the host application's profile store. The engine
only reads it, so the model is frozen; write-path helpers build new
instances instead of mutating this one.

Stored records use camelCase keys (completedSteps, wizardProgress, ...).
Both the camelCase aliases and the snake_case field names are accepted.
"""

import logging
from collections.abc import Mapping
from typing import Any, FrozenSet, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .wizard import is_wizard_step_id, order_step_ids

logger = logging.getLogger(__name__)


def _as_list(value: Any, field_name: str) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    logger.warning(f"Ignoring {field_name}: expected a list, got {type(value).__name__}")
    return []


def _unique_strings(values: list) -> List[str]:
    seen = set()
    result = []
    for value in values:
        if not isinstance(value, str) or value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


class WizardProgress(BaseModel):
    """
    Wizard progress blob stored on the profile.

    Besides the fields the engine reads, the blob carries opaque per-step
    answers (websitePreferences, marketingPreferences, ...). Those are kept
    as extra fields and round-trip unchanged.
    """

    current_step: Optional[str] = Field(None, alias="currentStep", description="Step the user is working on")
    completed_actions: List[str] = Field(
        default_factory=list,
        alias="completedActions",
        description="Action item IDs the user marked as done",
    )
    social_media_plan: Any = Field(None, alias="socialMediaPlan")
    branding_questionnaire: Any = Field(None, alias="brandingQuestionnaire")
    service_tier: Any = Field(None, alias="serviceTier")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @field_validator('current_step', mode='before')
    @classmethod
    def validate_current_step(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, str):
            return v
        logger.warning(f"Ignoring currentStep of type {type(v).__name__}")
        return None

    @field_validator('completed_actions', mode='before')
    @classmethod
    def validate_completed_actions(cls, v: Any) -> List[str]:
        """De-duplicate completed action IDs, keeping first occurrences."""
        return _unique_strings(_as_list(v, "completedActions"))

    def get(self, key: str, default: Any = None) -> Any:
        """Read a progress field by camelCase key or field name."""
        for name, field in type(self).model_fields.items():
            if key == name or key == field.alias:
                value = getattr(self, name)
                return default if value is None else value
        extra = self.model_extra or {}
        return extra.get(key, default)


class BusinessProfile(BaseModel):
    """Snapshot of a business profile as far as the engine is concerned."""

    id: Any = Field(None, description="Opaque profile identifier")
    completed_steps: List[str] = Field(
        default_factory=list,
        alias="completedSteps",
        description="Completed wizard step IDs, unique, in wizard order",
    )
    wizard_progress: WizardProgress = Field(
        default_factory=WizardProgress,
        alias="wizardProgress",
        description="Wizard progress blob",
    )

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @field_validator('completed_steps', mode='before')
    @classmethod
    def validate_completed_steps(cls, v: Any) -> List[str]:
        """Reduce completed steps to the known vocabulary with set semantics."""
        values = _as_list(v, "completedSteps")
        unknown = [s for s in values if not is_wizard_step_id(s)]
        if unknown:
            logger.warning(f"Dropping unknown completed steps: {unknown!r}")
        return order_step_ids(s for s in values if is_wizard_step_id(s))

    @field_validator('wizard_progress', mode='before')
    @classmethod
    def validate_wizard_progress(cls, v: Any) -> Any:
        if v is None:
            return {}
        if isinstance(v, WizardProgress):
            return v
        if isinstance(v, Mapping):
            return dict(v)
        logger.warning(f"Ignoring wizardProgress of type {type(v).__name__}")
        return {}

    @property
    def completed_step_set(self) -> FrozenSet[str]:
        return frozenset(self.completed_steps)

    @property
    def current_step(self) -> Optional[str]:
        return self.wizard_progress.current_step

    @property
    def completed_actions(self) -> FrozenSet[str]:
        return frozenset(self.wizard_progress.completed_actions)

    def has_completed(self, step_id: str) -> bool:
        """Check whether a wizard step is completed."""
        step_id = getattr(step_id, "value", step_id)
        return step_id in self.completed_step_set


ProfileInput = Union[BusinessProfile, Mapping, None]


def coerce_profile(profile: ProfileInput) -> Optional[BusinessProfile]:
    """
    Accept a BusinessProfile, a raw stored record, or None.

    Raw records are validated into a BusinessProfile; None stays None.
    """
    if profile is None or isinstance(profile, BusinessProfile):
        return profile
    return BusinessProfile.model_validate(dict(profile))
