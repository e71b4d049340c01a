import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def make_tree():
    def _make(root: Path, files: dict[str, str | bytes]) -> Path:
        for relative, content in files.items():
            path = root / relative
            if relative.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "code-snapshot"


@pytest.fixture
def write_config(config_root: Path):
    def _write(text: str) -> Path:
        config_root.mkdir(parents=True, exist_ok=True)
        path = config_root / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
