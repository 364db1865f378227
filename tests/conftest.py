from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture(autouse=True)
def _reset_verbose():
    from repo_campaign.infra.logger import set_verbose

    set_verbose(False)
    yield
    set_verbose(False)


@pytest.fixture
def campaign_dir(tmp_path):
    """A campaign directory with a small repos.txt and README.md."""
    directory = tmp_path / "upgrade-deps"
    directory.mkdir()
    (directory / "repos.txt").write_text(
        "# repos to upgrade\n"
        "\n"
        "acme/api\n"
        "github.example.com/acme/web@release\n"
        "acme/api\n",
        encoding="utf-8",
    )
    (directory / "README.md").write_text(
        "# Upgrade dependencies\n"
        "\n"
        "Bumps every dependency to its latest version.\n",
        encoding="utf-8",
    )
    return directory
