# gitease Test Fixtures
# Pytest fixtures for gitease tests

import shutil
import subprocess
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("GITEASE_CONFIG", raising=False)
    return home


@pytest.fixture
def sample_config() -> dict:
    """Create sample configuration dict."""
    return {
        "git": {
            "remote": "upstream",
            "default_source_branch": "develop",
        },
        "output": {"verbose": False, "colored": False},
    }


@pytest.fixture
def config_file(temp_home: Path, sample_config: dict) -> Path:
    """Create a configuration file."""
    config_dir = temp_home / ".config" / "gitease"
    config_dir.mkdir(parents=True)
    config_path = config_dir / "config.yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config, f, default_flow_style=False)

    return config_path


def _git(*args: str, cwd: Path) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True)
    return result.stdout.strip()


@pytest.fixture
def git_env(temp_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate git from the user's and system's configuration."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_TERMINAL_PROMPT", "0")


@pytest.fixture
def remote_repo(temp_dir: Path, git_env: None) -> Path:
    """A bare repository acting as 'origin', with one commit on main."""
    remote = temp_dir / "remote.git"
    _git("init", "--bare", str(remote), cwd=temp_dir)

    seed = temp_dir / "seed"
    seed.mkdir()
    _git("init", cwd=seed)
    _git("symbolic-ref", "HEAD", "refs/heads/main", cwd=seed)
    (seed / "README.md").write_text("# project\n", encoding="utf-8")
    _git("add", "README.md", cwd=seed)
    _git("commit", "-m", "initial commit", cwd=seed)
    _git("remote", "add", "origin", str(remote), cwd=seed)
    _git("push", "-u", "origin", "main", cwd=seed)
    _git("symbolic-ref", "HEAD", "refs/heads/main", cwd=remote)

    return remote


@pytest.fixture
def work_repo(temp_dir: Path, remote_repo: Path) -> Path:
    """A clone of remote_repo checked out on main and tracking origin/main."""
    work = temp_dir / "work"
    _git("clone", str(remote_repo), str(work), cwd=temp_dir)
    return work


@pytest.fixture
def git():
    """Run git in a directory and return stripped stdout."""
    return _git
