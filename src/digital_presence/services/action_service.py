"""
Action Recommendation Service - Recommended next actions for a profile.

Recommendations come from an ordered rule table. Every rule whose predicate
holds contributes one item; this is not a first-match system. The user's
completedActions only flag items as done, they never hide them.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from digital_presence.contracts.dashboard import ActionItem, ActionPriority
from digital_presence.contracts.profile import BusinessProfile, ProfileInput, coerce_profile
from digital_presence.contracts.wizard import TOTAL_WIZARD_STEPS, WizardStepId

logger = logging.getLogger(__name__)


def is_provided(value: Any) -> bool:
    """
    Truthiness of a stored progress value, as the web client sees it.

    None, False, 0, NaN and "" count as missing. Any other value counts as
    provided, including empty lists and mappings.
    """
    if value is None or value is False:
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


@dataclass(frozen=True)
class ActionRule:
    """A recommendation rule: when predicate holds, recommend the action."""
    id: str
    title: str
    description: str
    link: str
    link_text: str
    priority: ActionPriority
    predicate: Callable[[BusinessProfile], bool]

    def evaluate(self, profile: BusinessProfile) -> Optional[ActionItem]:
        """Build the action item if the rule fires for the profile."""
        if not self.predicate(profile):
            return None
        return ActionItem(
            id=self.id,
            title=self.title,
            description=self.description,
            link=self.link,
            link_text=self.link_text,
            completed=self.id in profile.completed_actions,
            priority=self.priority,
        )


def _branding_pending(profile: BusinessProfile) -> bool:
    return profile.has_completed(WizardStepId.BUSINESS_INFO) and not profile.has_completed(WizardStepId.BRANDING)


def _social_plan_missing(profile: BusinessProfile) -> bool:
    return not is_provided(profile.wizard_progress.social_media_plan)


def _questionnaire_missing(profile: BusinessProfile) -> bool:
    return profile.has_completed(WizardStepId.BRANDING) and not is_provided(
        profile.wizard_progress.branding_questionnaire
    )


def _service_tier_missing(profile: BusinessProfile) -> bool:
    return not is_provided(profile.wizard_progress.service_tier)


def _wizard_finished(profile: BusinessProfile) -> bool:
    return len(profile.completed_steps) == TOTAL_WIZARD_STEPS


ACTION_RULES: tuple[ActionRule, ...] = (
    ActionRule(
        id="complete-branding",
        title="Complete your brand development",
        description="Define your brand identity and visual elements",
        link="/business-wizard?step=branding",
        link_text="Continue Setup",
        priority=ActionPriority.HIGH,
        predicate=_branding_pending,
    ),
    ActionRule(
        id="create-social-plan",
        title="Create a social media strategy",
        description="Plan your content and social media presence",
        link="/social-media-plan",
        link_text="Create Plan",
        priority=ActionPriority.MEDIUM,
        predicate=_social_plan_missing,
    ),
    ActionRule(
        id="detailed-branding",
        title="Complete detailed brand questionnaire",
        description="Further refine your brand identity",
        link="/brand-questionnaire",
        link_text="Start Questionnaire",
        priority=ActionPriority.MEDIUM,
        predicate=_questionnaire_missing,
    ),
    ActionRule(
        id="select-service",
        title="Choose a service tier",
        description="Select the right level of support for your business",
        link="/service-selection",
        link_text="View Plans",
        priority=ActionPriority.LOW,
        predicate=_service_tier_missing,
    ),
    ActionRule(
        id="explore-resources",
        title="Explore resource library",
        description="Access guides and templates for your business",
        link="/resources",
        link_text="Browse Resources",
        priority=ActionPriority.LOW,
        predicate=_wizard_finished,
    ),
)

ACTION_IDS: tuple[str, ...] = tuple(rule.id for rule in ACTION_RULES)


def sort_actions(actions: Sequence[ActionItem]) -> List[ActionItem]:
    """Incomplete first, then by priority; equal keys keep their order."""
    return sorted(actions, key=lambda a: (a.completed, a.priority.rank))


def compute_actions(
    profile: ProfileInput,
    rules: Sequence[ActionRule] = ACTION_RULES,
) -> List[ActionItem]:
    """
    Derive the recommended actions for a profile.

    Args:
        profile: Profile snapshot, raw stored record, or None
        rules: Ordered rule table, ACTION_RULES by default

    Returns:
        Action items sorted incomplete-first then by priority. Empty when
        there is no profile.
    """
    snapshot = coerce_profile(profile)
    if snapshot is None:
        return []

    seen = set()
    actions: List[ActionItem] = []
    for rule in rules:
        item = rule.evaluate(snapshot)
        if item is None:
            continue
        if item.id in seen:
            logger.warning(f"Duplicate action rule {item.id!r} ignored")
            continue
        seen.add(item.id)
        actions.append(item)

    logger.debug(f"Profile {snapshot.id!r}: {len(actions)} recommended actions")
    return sort_actions(actions)
