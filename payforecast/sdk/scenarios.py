"""Saved scenario storage.

Scenarios are stored as a YAML list in scenarios.yaml in the config
directory. Every scenario is validated on the way in and on the way out.
"""

import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import yaml

from .config import get_config_dir, get_scenarios_path
from .schemas import Scenario, ScenarioValidationError, validate_scenario

logger = logging.getLogger(__name__)


class ScenarioNotFoundError(Exception):
    """Raised when a scenario id is not in the store."""
    pass


def _load_raw() -> List[dict]:
    path = get_scenarios_path()
    if not path.exists():
        return []

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return data.get("scenarios", [])


def _save_raw(scenarios: List[dict]) -> Path:
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    path = get_scenarios_path()
    with open(path, "w") as f:
        yaml.safe_dump({"scenarios": scenarios}, f, sort_keys=False, allow_unicode=True)
    return path


def list_scenarios() -> List[Scenario]:
    """Load all saved scenarios, in saved order."""
    return [validate_scenario(data) for data in _load_raw()]


def get_scenario(scenario_id: str) -> Scenario:
    """Load a saved scenario by id.

    Raises:
        ScenarioNotFoundError: If no scenario has the id
    """
    for scenario in list_scenarios():
        if scenario.id == scenario_id:
            return scenario
    raise ScenarioNotFoundError(f"Scenario not found: {scenario_id}")


def load_scenario_file(path: Path) -> Scenario:
    """Load and validate a scenario from a YAML or JSON file.

    A missing id is filled with a new UUID.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ScenarioValidationError: If the content is not a valid scenario
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")

    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)  # YAML is a superset of JSON
        except yaml.YAMLError as e:
            raise ScenarioValidationError([f"{path.name}: {e}"]) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ScenarioValidationError([f"{path.name}: expected a mapping of scenario fields"])

    if "id" not in data:
        data["id"] = str(uuid.uuid4())
    return validate_scenario(data)


def save_scenario(scenario: Scenario) -> Scenario:
    """Create or update a scenario in the store.

    Sets created_at on first save and updated_at on every save.

    Returns:
        The scenario as saved (with timestamps)
    """
    now = datetime.now().replace(microsecond=0)
    raw = _load_raw()

    existing = next((i for i, s in enumerate(raw) if s.get("id") == scenario.id), None)
    created_at = scenario.created_at
    if existing is not None and created_at is None:
        created_at = validate_scenario(raw[existing]).created_at

    saved = scenario.model_copy(update={"created_at": created_at or now, "updated_at": now})
    data = saved.model_dump(mode="json", exclude_none=True)

    if existing is None:
        raw.append(data)
        logger.debug(f"created scenario {scenario.id}")
    else:
        raw[existing] = data
        logger.debug(f"updated scenario {scenario.id}")

    _save_raw(raw)
    return saved


def delete_scenario(scenario_id: str) -> None:
    """Delete a scenario from the store.

    Raises:
        ScenarioNotFoundError: If no scenario has the id
    """
    raw = _load_raw()
    remaining = [s for s in raw if s.get("id") != scenario_id]
    if len(remaining) == len(raw):
        raise ScenarioNotFoundError(f"Scenario not found for deletion: {scenario_id}")
    _save_raw(remaining)
    logger.debug(f"deleted scenario {scenario_id}")


def find_scenario(ref: str) -> Optional[Scenario]:
    """Find a saved scenario by exact id, id prefix, or title (case-insensitive).

    Returns:
        Matching scenario, or None if there is no unique match
    """
    scenarios = list_scenarios()
    for scenario in scenarios:
        if scenario.id == ref:
            return scenario

    matches = [
        s for s in scenarios
        if s.id.startswith(ref) or s.title.lower() == ref.lower()
    ]
    return matches[0] if len(matches) == 1 else None
