from pathlib import Path

import pytest

SAMPLE = """\
#python 3.11.1 3.10.9 # foo
shellcheck 0.9.0
shfmt 3.6.0 # test comment
#nodejs 18.13.0
nodejs system
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE


@pytest.fixture
def project_dir(tmp_path: Path, sample_text: str) -> Path:
    """Project directory with a .tool-versions file."""
    (tmp_path / ".tool-versions").write_text(sample_text)
    return tmp_path


@pytest.fixture
def tool_versions_path(project_dir: Path) -> Path:
    return project_dir / ".tool-versions"
