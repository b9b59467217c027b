"""Tax schema loading.

Tax schemas are versioned YAML documents shipped in payforecast/tax_schemas/
(e.g. 2024.yaml). A schema can also be loaded from an arbitrary YAML or JSON
file. Schemas are treated as immutable once loaded.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from ..config import get_setting
from .schemas import TaxSchema

logger = logging.getLogger(__name__)


class TaxSchemaNotFoundError(Exception):
    """Raised when a tax schema version or file cannot be found."""
    pass


def _get_tax_schemas_dir() -> Path:
    """Get the packaged tax_schemas directory path."""
    return Path(__file__).parent.parent.parent / "tax_schemas"  # taxes -> sdk -> payforecast


def get_available_versions() -> List[str]:
    """Get packaged tax schema versions, newest first."""
    schemas_dir = _get_tax_schemas_dir()
    return sorted((p.stem for p in schemas_dir.glob("*.yaml")), reverse=True)


def _parse_tax_schema(data: dict, source: str) -> TaxSchema:
    try:
        schema = TaxSchema.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid tax schema in {source}: {e}") from e

    for warning in schema.bracket_warnings():
        logger.warning(f"{source}: {warning}")
    return schema


def load_tax_schema_file(path: Path) -> TaxSchema:
    """Load a tax schema from a YAML or JSON file.

    Args:
        path: Path to the schema file (.json is parsed as JSON, anything
              else as YAML)

    Returns:
        Validated TaxSchema

    Raises:
        TaxSchemaNotFoundError: If the file doesn't exist
        ValueError: If the file content is not a valid tax schema
    """
    path = Path(path)
    if not path.exists():
        raise TaxSchemaNotFoundError(f"Tax schema file not found: {path}")

    with open(path, "r") as f:
        try:
            if path.suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Invalid tax schema in {path.name}: {e}") from e

    logger.debug(f"Loaded tax schema file: {path}")
    return _parse_tax_schema(data or {}, path.name)


@lru_cache(maxsize=None)
def load_tax_schema(version: Optional[str] = None) -> TaxSchema:
    """Load a packaged tax schema by version (cached).

    Args:
        version: Schema version (e.g., "2024"). Defaults to the newest
                 packaged version.

    Returns:
        Validated TaxSchema

    Raises:
        TaxSchemaNotFoundError: If no schema exists for the version
    """
    if version is None:
        versions = get_available_versions()
        if not versions:
            raise TaxSchemaNotFoundError(f"No tax schemas found in {_get_tax_schemas_dir()}")
        version = versions[0]

    schema_file = _get_tax_schemas_dir() / f"{version}.yaml"
    if not schema_file.exists():
        available = ", ".join(get_available_versions()) or "none"
        raise TaxSchemaNotFoundError(
            f"Tax schema not found for version {version} (available: {available})"
        )

    return load_tax_schema_file(schema_file)


def resolve_tax_schema(ref: Optional[str] = None) -> TaxSchema:
    """Resolve a tax schema from a version string or file path.

    Resolution order:
    1. ref argument (version or path)
    2. settings.json "tax_schema" key (version or path)
    3. Newest packaged version

    A ref is treated as a path if it names an existing file or ends in
    .yaml/.yml/.json; otherwise it is a packaged version.
    """
    ref = ref or get_setting("tax_schema")
    if not ref:
        return load_tax_schema()

    ref = str(ref)
    if Path(ref).suffix in (".yaml", ".yml", ".json") or Path(ref).is_file():
        return load_tax_schema_file(Path(ref).expanduser())
    return load_tax_schema(ref)
