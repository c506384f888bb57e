"""Shared fixtures."""

import tempfile
from pathlib import Path

import pytest
from git import Repo


@pytest.fixture
def temp_git_project():
    """Create a temporary git project with two commits."""
    with tempfile.TemporaryDirectory() as temp_dir:
        project_path = Path(temp_dir)
        repo = Repo.init(project_path)

        with repo.config_writer() as config:
            config.set_value("user", "name", "Test User")
            config.set_value("user", "email", "test@example.com")

        (project_path / "main.py").write_text("def main():\n    print('Hello')\n")
        (project_path / "README.md").write_text("# Test Project\n")
        repo.index.add(["main.py", "README.md"])
        repo.index.commit("Initial commit")

        (project_path / "src").mkdir()
        (project_path / "src" / "core.py").write_text("class Core:\n    pass\n")
        (project_path / "main.py").write_text("def main():\n    print('Bye')\n")
        repo.index.add(["src/core.py", "main.py"])
        repo.index.commit("Fix [greeting] bug\n\nSays bye now.\nBUG=123\n")

        yield project_path
