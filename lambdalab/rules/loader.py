import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from lambdalab.rules.models import Rules

# First ```yaml block; an unclosed block runs to end of text
_YAML_FENCE = re.compile(
    r"^[ \t]*```yaml[^\n]*\n(.*?)(?:^[ \t]*```|\Z)",
    re.MULTILINE | re.DOTALL,
)


def default_rules() -> Rules:
    return Rules()


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    The file may be plain YAML or markdown holding a ```yaml block.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    content = path.read_text()
    fenced = _YAML_FENCE.search(content)
    if fenced:
        content = fenced.group(1)

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
