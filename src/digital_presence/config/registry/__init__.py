"""
Registry Configuration Loaders

Registry files define the static catalogs the engine consults:
- governance.yaml: governance roles, governance levels and onboarding steps

All registry files must be YAML with strict validation.
"""

from pydantic import BaseModel, ConfigDict, Field


class RegistryBase(BaseModel):
    """Base model for all registry configurations."""
    model_config = ConfigDict(frozen=True)

    version: str = Field(..., description="Registry schema version")


# Re-export specific registry loaders
from .governance import (  # noqa: E402
    GovernanceCatalogRegistry,
    GovernanceLevel,
    GovernanceRole,
    GovernanceScope,
    OnboardingStep,
    OnboardingStepType,
    RoleLevel,
    VotingMechanism,
    load_governance_catalog,
)

__all__ = [
    'RegistryBase',
    'load_governance_catalog', 'GovernanceCatalogRegistry',
    'GovernanceRole', 'GovernanceLevel', 'OnboardingStep',
    'RoleLevel', 'GovernanceScope', 'VotingMechanism', 'OnboardingStepType',
]
