from pathlib import Path

import pytest

from lambdalab.adapters.console import RecordingConsole

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def rules_file(tmp_path):
    """
    Writes a rules file into a temp dir and returns a factory for its path.
    """

    def _write(content: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def project_rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"
