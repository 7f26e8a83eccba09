"""Digital Presence CLI."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from digital_presence.config import ConfigError
from digital_presence.config.registry.governance import load_governance_catalog
from digital_presence.services.dashboard_viewmodel import DashboardViewModel
from digital_presence.services.governance_service import (
    get_required_approvers,
    get_role_by_id,
    get_steps_for_role,
)

logger = logging.getLogger(__name__)


def load_yaml_or_json(filepath: Path) -> dict:
    """Load YAML or JSON file."""
    content = filepath.read_text(encoding="utf-8")
    if filepath.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(content)
    else:
        return json.loads(content)


def dashboard_command(args) -> int:
    """Print progress and recommended actions for a stored profile."""
    try:
        record = load_yaml_or_json(args.profile)
        viewmodel = DashboardViewModel.from_record(record)
    except (OSError, TypeError, ValueError, yaml.YAMLError, ValidationError) as e:
        print(f"✗ Cannot read profile {args.profile}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(viewmodel.snapshot(), indent=2, default=str))
    return 0


def roles_command(args) -> int:
    """List governance roles."""
    catalog = load_governance_catalog(args.catalog)
    for role in catalog.roles:
        vote = "votes" if role.voting_rights else "no vote"
        term = f", term {role.term_length}" if role.term_length else ""
        print(f"{role.id:<16} {role.title} ({role.level.value}, {vote}{term})")
    return 0


def onboarding_command(args) -> int:
    """List the onboarding steps of a role."""
    catalog = load_governance_catalog(args.catalog)
    if get_role_by_id(args.role_id, catalog) is None:
        print(f"✗ Unknown role: {args.role_id}", file=sys.stderr)
        return 1
    for step in get_steps_for_role(args.role_id, catalog):
        print(f"{step.order}. {step.title} [{step.type.value}] - {step.estimated_time}")
    return 0


def approvers_command(args) -> int:
    """List the decision makers of a governance level."""
    catalog = load_governance_catalog(args.catalog)
    approvers = get_required_approvers(args.level_id, catalog)
    if not approvers:
        print(f"✗ No approvers for governance level: {args.level_id}", file=sys.stderr)
        return 1
    for approver in approvers:
        print(approver)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="digital-presence", description="Digital Presence engine CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--catalog", type=Path, help="Governance catalog YAML (default: bundled catalog)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    dashboard_parser = subparsers.add_parser("dashboard", help="Show progress and recommended actions")
    dashboard_parser.add_argument("profile", type=Path, help="Business profile record (JSON/YAML)")
    dashboard_parser.set_defaults(func=dashboard_command)

    roles_parser = subparsers.add_parser("roles", help="List governance roles")
    roles_parser.set_defaults(func=roles_command)

    onboarding_parser = subparsers.add_parser("onboarding", help="List onboarding steps for a role")
    onboarding_parser.add_argument("role_id", help="Role ID (e.g., area-leader)")
    onboarding_parser.set_defaults(func=onboarding_command)

    approvers_parser = subparsers.add_parser("approvers", help="List approvers of a governance level")
    approvers_parser.add_argument("level_id", help="Governance level ID (e.g., continental)")
    approvers_parser.set_defaults(func=approvers_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        print(f"✗ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
