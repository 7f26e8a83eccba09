"""
Dashboard Contracts - View models derived from a business profile.

Every instance here is produced fresh by the engines and never persisted.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .wizard import WizardStep


class StepStatus(str, Enum):
    """Derived status of a wizard step."""
    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    NOT_STARTED = "not-started"


class ActionPriority(str, Enum):
    """Priority of a recommended action."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank, most urgent first."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    ActionPriority.HIGH: 0,
    ActionPriority.MEDIUM: 1,
    ActionPriority.LOW: 2,
}


class StepProgress(BaseModel):
    """A wizard step paired with its derived status."""

    step: WizardStep
    status: StepStatus

    model_config = ConfigDict(frozen=True)


class ProgressSummary(BaseModel):
    """Overall wizard progress for one profile snapshot."""

    steps: List[StepProgress] = Field(..., description="Per-step status in wizard order")
    percent: int = Field(..., ge=0, le=100, description="Completion percentage")

    model_config = ConfigDict(frozen=True)

    @property
    def completed_count(self) -> int:
        return sum(1 for s in self.steps if s.status == StepStatus.COMPLETED)

    @property
    def is_complete(self) -> bool:
        return self.percent == 100

    @property
    def next_step(self) -> Optional[WizardStep]:
        """First step that is not completed yet."""
        for item in self.steps:
            if item.status != StepStatus.COMPLETED:
                return item.step
        return None

    def status_of(self, step_id: str) -> Optional[StepStatus]:
        step_id = getattr(step_id, "value", step_id)
        for item in self.steps:
            if item.step.id.value == step_id:
                return item.status
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "percent": self.percent,
            "isComplete": self.is_complete,
            "steps": [
                {
                    "id": item.step.id.value,
                    "name": item.step.name,
                    "description": item.step.description,
                    "route": item.step.route,
                    "status": item.status.value,
                }
                for item in self.steps
            ],
        }


class ActionItem(BaseModel):
    """Recommended next action for the business owner."""

    id: str = Field(..., description="Stable action identifier")
    title: str
    description: str
    link: str = Field(..., description="Route of the tool that performs the action")
    link_text: str
    completed: bool = False
    priority: ActionPriority

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "linkText": self.link_text,
            "completed": self.completed,
            "priority": self.priority.value,
        }
