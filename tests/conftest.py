"""
Pytest configuration and fixtures.

Ensures src/ is importable and provides business profile records shaped
like the ones the profile store returns.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add src/ to Python path if not already present
# This ensures tests can import digital_presence without installing it
repo_root = Path(__file__).parent.parent
src_path = repo_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from digital_presence.config import clear_config_caches  # noqa: E402

ALL_STEPS = ["business-info", "branding", "website", "marketing", "launch"]


@pytest.fixture(autouse=True)
def _fresh_config_caches():
    """Every test sees freshly loaded registries."""
    clear_config_caches()
    yield
    clear_config_caches()


@pytest.fixture
def new_profile_record() -> dict:
    """Profile right after the business info form was submitted."""
    return {
        "id": 7,
        "businessName": "Sunrise Bakery",
        "completedSteps": ["business-info"],
        "wizardProgress": {"currentStep": "branding"},
    }


@pytest.fixture
def finished_profile_record() -> dict:
    """Profile with every wizard step and every follow-up tool done."""
    return {
        "id": 8,
        "completedSteps": list(ALL_STEPS),
        "wizardProgress": {
            "currentStep": "complete",
            "serviceTier": "pro",
            "socialMediaPlan": {"platforms": ["instagram"]},
            "brandingQuestionnaire": {"tone": "warm"},
            "launchPreferences": {"launchDate": "2024-05-01"},
        },
    }


@pytest.fixture
def write_registry(tmp_path: Path):
    """Write a registry YAML file into a temp dir and return its path."""
    def _write(content: str, name: str = "governance.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
