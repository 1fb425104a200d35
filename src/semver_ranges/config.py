"""Policy configuration loader.

A policy file is a JSON document listing named constraints::

    {"constraints": [{"id": "runtime", "range": ">=1.2 <2", "enabled": true}]}

The structure is checked against ``policy.schema.json`` and every ``range``
is parsed up front, so a loaded ``Settings`` only holds valid constraints.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigError, SemverError
from .models.constraint import Constraint
from .parsers.constraint import parse as parse_constraint
from .validators.policy import PolicyValidationError, validate_policy

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "semver-ranges.json"
CONFIG_PATH_ENV_VAR = "SEMVER_RANGES_POLICY"


@dataclass(slots=True, frozen=True)
class PolicyConstraint:
    """A named constraint from the policy file."""

    id: str
    constraint: Constraint
    enabled: bool
    description: str

    @property
    def range(self) -> str:
        return str(self.constraint)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PolicyConstraint:
        constraint_id = data["id"]
        try:
            constraint = parse_constraint(data["range"])
        except SemverError as exc:
            raise ConfigError(f"Constraint '{constraint_id}' has invalid 'range': {exc}") from exc

        return cls(
            id=constraint_id,
            constraint=constraint,
            enabled=data.get("enabled", True),
            description=data.get("description", ""),
        )


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    constraints: list[PolicyConstraint]

    def get_enabled_constraints(self) -> list[PolicyConstraint]:
        return [c for c in self.constraints if c.enabled]

    def get_constraint_by_id(self, constraint_id: str) -> PolicyConstraint | None:
        for c in self.constraints:
            if c.id == constraint_id:
                return c
        return None


def _resolve_config_path(path: Path | str | None = None) -> Path:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. SEMVER_RANGES_POLICY environment variable
    3. semver-ranges.json in the working directory
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return Path.cwd() / DEFAULT_CONFIG_NAME


def settings_from_dict(data: Any) -> Settings:
    """Validate an already-decoded policy document."""
    try:
        validate_policy(data)
    except PolicyValidationError as exc:
        raise ConfigError(f"Invalid policy configuration:{exc}") from exc

    constraints: list[PolicyConstraint] = []
    seen_ids: set[str] = set()
    for entry in data["constraints"]:
        policy_constraint = PolicyConstraint.from_dict(entry)
        if policy_constraint.id in seen_ids:
            raise ConfigError(f"Duplicate constraint ID: '{policy_constraint.id}'")
        seen_ids.add(policy_constraint.id)
        constraints.append(policy_constraint)

    return Settings(constraints=constraints)


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON file.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    settings = settings_from_dict(data)
    logger.info(
        "loaded %d constraint(s) from %s", len(settings.constraints), config_path
    )
    return settings
