from pathlib import Path

import pytest

from code_snapshot.config import ConfigRepository, SnapshotConfig, default_config_path
from code_snapshot.errors import InvalidConfigSchemaError, InvalidYamlFormatError


def test_default_config_path_uses_xdg(config_root: Path) -> None:
    assert default_config_path() == config_root / "config.yaml"


def test_default_config_path_falls_back_to_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME")
    assert default_config_path() == tmp_path / ".config" / "code-snapshot" / "config.yaml"


def test_missing_config_gives_defaults() -> None:
    assert ConfigRepository().load() == SnapshotConfig()


def test_empty_config_gives_defaults(write_config) -> None:
    write_config("")
    assert ConfigRepository().load() == SnapshotConfig()


def test_comment_only_config_gives_defaults(write_config) -> None:
    write_config("# nothing here\n")
    assert ConfigRepository().load() == SnapshotConfig()


def test_full_config(write_config) -> None:
    write_config('fence: "~~~"\nrules_file: .snapshotignore\nsummary: true\n')

    config = ConfigRepository().load()

    assert config == SnapshotConfig(fence="~~~", rules_file=".snapshotignore", summary=True)


def test_partial_config_keeps_defaults(write_config) -> None:
    write_config("summary: true\n")

    config = ConfigRepository().load()

    assert config.fence == "```"
    assert config.rules_file == ".gitignore"
    assert config.summary is True


def test_explicit_path(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text('fence: "<<<"\n', encoding="utf-8")

    assert ConfigRepository(path).load().fence == "<<<"


def test_invalid_yaml(write_config) -> None:
    write_config("fence: [unclosed\n")

    with pytest.raises(InvalidYamlFormatError):
        ConfigRepository().load()


def test_unknown_key_rejected(write_config) -> None:
    write_config("colour: red\n")

    with pytest.raises(InvalidConfigSchemaError):
        ConfigRepository().load()


def test_wrong_type_reports_field(write_config) -> None:
    write_config("summary: sometimes\n")

    with pytest.raises(InvalidConfigSchemaError) as excinfo:
        ConfigRepository().load()

    assert "summary" in str(excinfo.value)


def test_rules_file_must_be_plain_name(write_config) -> None:
    write_config("rules_file: sub/.gitignore\n")

    with pytest.raises(InvalidConfigSchemaError):
        ConfigRepository().load()


def test_top_level_list_rejected(write_config) -> None:
    write_config("- fence\n")

    with pytest.raises(InvalidConfigSchemaError):
        ConfigRepository().load()
