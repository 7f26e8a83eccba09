"""
Governance Catalog Service - Read-only queries over the governance model.

Lookups never raise for unknown IDs: a miss is reported as None, an empty
list or False. Only a broken catalog file raises (ConfigError, from the
loader).
"""

import logging
from typing import List, Optional, Union

from digital_presence.config.registry.governance import (
    GovernanceCatalogRegistry,
    GovernanceLevel,
    GovernanceRole,
    GovernanceScope,
    OnboardingStep,
    load_governance_catalog,
)

logger = logging.getLogger(__name__)


def _catalog(catalog: Optional[GovernanceCatalogRegistry]) -> GovernanceCatalogRegistry:
    return catalog if catalog is not None else load_governance_catalog()


def get_role_by_id(
    role_id: str,
    catalog: Optional[GovernanceCatalogRegistry] = None,
) -> Optional[GovernanceRole]:
    """Get a governance role by ID, or None if the role is unknown."""
    return _catalog(catalog).get_role_by_id(role_id)


def get_steps_for_role(
    role_id: str,
    catalog: Optional[GovernanceCatalogRegistry] = None,
) -> List[OnboardingStep]:
    """
    Get the onboarding steps a role has to go through.

    A step applies when its required_for list contains "all" or the role ID.
    Result is sorted by step order.
    """
    return _catalog(catalog).get_steps_for_role(role_id)


def get_governance_level_by_scope(
    scope: Union[GovernanceScope, str],
    catalog: Optional[GovernanceCatalogRegistry] = None,
) -> Optional[GovernanceLevel]:
    """Get the first governance level declared for a scope."""
    return _catalog(catalog).get_level_by_scope(scope)


def can_user_vote(
    role_id: str,
    catalog: Optional[GovernanceCatalogRegistry] = None,
) -> bool:
    """
    Check whether holders of a role may vote.

    Unknown roles are non-voting.
    """
    role = _catalog(catalog).get_role_by_id(role_id)
    if role is None:
        logger.debug(f"Unknown role {role_id!r} treated as non-voting")
        return False
    return role.voting_rights


def get_required_approvers(
    governance_level_id: str,
    catalog: Optional[GovernanceCatalogRegistry] = None,
) -> List[str]:
    """Get the decision makers of a governance level, looked up by level ID."""
    level = _catalog(catalog).get_level_by_id(governance_level_id)
    if level is None:
        return []
    return list(level.decision_makers)


def get_onboarding_progress(
    role_id: str,
    current_index: int,
    catalog: Optional[GovernanceCatalogRegistry] = None,
) -> int:
    """
    Percentage shown while a candidate works through their onboarding steps.

    current_index is the zero-based position of the step on screen, so the
    first step already counts as started.
    """
    steps = get_steps_for_role(role_id, catalog)
    if not steps:
        return 0
    position = min(max(current_index + 1, 0), len(steps))
    return (200 * position + len(steps)) // (2 * len(steps))
