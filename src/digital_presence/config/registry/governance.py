"""
Governance Catalog Registry Loader

Defines the static governance model: roles, governance levels and the
onboarding steps a new member goes through.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import RegistryBase

ALL_ROLES = "all"


def get_registry_path(filename: str) -> Path:
    """Get path to registry configuration file."""
    from .. import get_registry_path as _get_registry_path
    return _get_registry_path(filename)


def load_yaml(path: Path) -> dict:
    """Load YAML file with proper error handling."""
    from .. import load_yaml as _load_yaml
    return _load_yaml(path)


class RoleLevel(str, Enum):
    """Hierarchy level a governance role sits at."""
    MEMBER = "member"
    AREA_LEADER = "area-leader"
    GUIDING_STAR = "guiding-star"
    COUNCIL_MEMBER = "council-member"


class GovernanceScope(str, Enum):
    """Organizational reach of a governance level."""
    GLOBAL = "global"
    CONTINENTAL = "continental"
    AREA = "area"
    LOCAL = "local"


class VotingMechanism(str, Enum):
    UNANIMOUS = "unanimous"
    MAJORITY = "majority"
    QUALIFIED_MAJORITY = "qualified-majority"


class OnboardingStepType(str, Enum):
    INFORMATION = "information"
    EVALUATION = "evaluation"
    DECISION = "decision"
    APPROVAL = "approval"


class GovernanceRole(BaseModel):
    """Role a member can hold in the constellation."""

    id: str = Field(..., min_length=1, description="Role identifier (e.g., 'area-leader')")
    title: str = Field(..., description="Display title")
    description: str = Field(..., description="Human-readable description")
    responsibilities: List[str] = Field(default_factory=list, description="Ordered responsibilities")
    requirements: List[str] = Field(default_factory=list, description="Ordered requirements")
    level: RoleLevel = Field(..., description="Hierarchy level")
    voting_rights: bool = Field(..., description="Whether holders of this role may vote")
    term_length: Optional[str] = Field(None, description="Term length for rotating positions")

    model_config = ConfigDict(frozen=True)


class GovernanceLevel(BaseModel):
    """Decision-making level with its voting rules."""

    id: str = Field(..., min_length=1, description="Level identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Human-readable description")
    scope: GovernanceScope = Field(..., description="Organizational scope")
    decision_makers: List[str] = Field(default_factory=list, description="Ordered decision makers")
    voting_mechanism: VotingMechanism = Field(..., description="How decisions are voted")
    quorum: Optional[int] = Field(None, ge=1, description="Minimum number of voters")

    model_config = ConfigDict(frozen=True)


class OnboardingStep(BaseModel):
    """Step in the member onboarding workflow."""

    id: str = Field(..., min_length=1, description="Step identifier")
    title: str = Field(..., description="Display title")
    description: str = Field(..., description="Human-readable description")
    type: OnboardingStepType = Field(..., description="Kind of step")
    required_for: List[str] = Field(
        ...,
        description="Role IDs that require this step, or 'all'",
    )
    estimated_time: str = Field(..., description="Estimated duration (free text)")
    order: int = Field(..., description="Sort key, ascending")

    model_config = ConfigDict(frozen=True)

    @field_validator('required_for')
    @classmethod
    def validate_required_for(cls, v: List[str]) -> List[str]:
        """Validate required_for names at least one role."""
        if not v:
            raise ValueError("required_for cannot be empty")
        return v

    def applies_to(self, role_id: str) -> bool:
        """Check whether the step is required for a role."""
        return ALL_ROLES in self.required_for or role_id in self.required_for


def _check_unique_ids(items, label: str) -> None:
    ids = [item.id for item in items]
    if len(ids) != len(set(ids)):
        duplicates = sorted({item_id for item_id in ids if ids.count(item_id) > 1})
        raise ValueError(f"Duplicate {label} IDs: {duplicates}")


class GovernanceCatalogRegistry(RegistryBase):
    """Governance catalog registry configuration."""

    roles: List[GovernanceRole] = Field(..., description="Governance roles")
    levels: List[GovernanceLevel] = Field(..., description="Governance levels")
    onboarding_steps: List[OnboardingStep] = Field(..., description="Onboarding steps")

    @field_validator('roles')
    @classmethod
    def validate_roles(cls, v: List[GovernanceRole]) -> List[GovernanceRole]:
        if not v:
            raise ValueError("roles cannot be empty")
        _check_unique_ids(v, "role")
        return v

    @field_validator('levels')
    @classmethod
    def validate_levels(cls, v: List[GovernanceLevel]) -> List[GovernanceLevel]:
        if not v:
            raise ValueError("levels cannot be empty")
        _check_unique_ids(v, "governance level")
        return v

    @field_validator('onboarding_steps')
    @classmethod
    def validate_onboarding_steps(cls, v: List[OnboardingStep]) -> List[OnboardingStep]:
        if not v:
            raise ValueError("onboarding_steps cannot be empty")
        _check_unique_ids(v, "onboarding step")
        return v

    def get_role_by_id(self, role_id: str) -> Optional[GovernanceRole]:
        """Get role by ID."""
        for role in self.roles:
            if role.id == role_id:
                return role
        return None

    def get_role_ids(self) -> List[str]:
        """Get list of all role IDs."""
        return [r.id for r in self.roles]

    def get_roles_by_level(self, level: RoleLevel) -> List[GovernanceRole]:
        """Get all roles at a specific hierarchy level."""
        return [r for r in self.roles if r.level == level]

    def get_level_by_id(self, level_id: str) -> Optional[GovernanceLevel]:
        """Get governance level by ID."""
        for level in self.levels:
            if level.id == level_id:
                return level
        return None

    def get_level_by_scope(self, scope: Union[GovernanceScope, str]) -> Optional[GovernanceLevel]:
        """Get the first governance level declared for a scope."""
        for level in self.levels:
            if level.scope == scope:
                return level
        return None

    def get_steps_for_role(self, role_id: str) -> List[OnboardingStep]:
        """
        Get onboarding steps required for a role.

        Steps are sorted by their order; ties keep declaration order.
        """
        steps = [s for s in self.onboarding_steps if s.applies_to(role_id)]
        return sorted(steps, key=lambda s: s.order)

    def get_role_choices(self) -> List[tuple[str, str]]:
        """Get (id, title) pairs for UI dropdowns."""
        return [(r.id, r.title) for r in self.roles]


@lru_cache(maxsize=4)
def load_governance_catalog(path: Optional[Path] = None) -> GovernanceCatalogRegistry:
    """
    Load governance catalog registry from YAML file.

    Args:
        path: Optional path to governance catalog YAML file.
              Defaults to configs/registry/governance.yaml

    Returns:
        GovernanceCatalogRegistry instance

    Raises:
        ConfigError: If loading or validation fails
    """
    if path is None:
        path = get_registry_path("governance.yaml")

    data = load_yaml(path)
    try:
        return GovernanceCatalogRegistry(**data)
    except Exception as e:
        from .. import ConfigValidationError
        raise ConfigValidationError(f"Failed to validate governance catalog at {path}: {e}")
