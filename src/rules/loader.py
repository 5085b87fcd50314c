import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

logger = logging.getLogger(__name__)

# Default rules file path (relative to project root)
DEFAULT_RULES_PATH = "rules.yaml"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """
    Work out which rules file to read.

    Explicit path wins, then the RULES_PATH environment variable,
    then rules.yaml at the project root.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get("RULES_PATH")
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def default_rules() -> Rules:
    """Built-in defaults, identical to the shipped rules.yaml."""
    return Rules()


def load_rules(path: Path | str | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    rules_path = resolve_rules_path(path)
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found at: {rules_path}")

    with open(rules_path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info("Rules loaded from %s", rules_path)
    return rules
