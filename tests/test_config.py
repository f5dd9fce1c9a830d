import logging
import pytest
import yaml
from utils.config import DEFAULTS, DemoConfig
import create_yaml_config


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path):
    config = DemoConfig(tmp_path / "absent.yaml")
    assert config.load_config() == DEFAULTS
    assert config.logistics() == ["road", "sea"]
    assert config.furniture() == ["victorian", "modern"]
    assert config.builder() is True


def test_no_path_gives_defaults():
    assert DemoConfig().load_config() == DEFAULTS


def test_file_overrides_some_keys(tmp_path):
    path = write_yaml(tmp_path / "config.yaml", {"logistics": ["sea"], "builder": False, "log_level": "debug"})
    config = DemoConfig(path)
    cfg = config.load_config()

    assert cfg["logistics"] == ["sea"]
    assert config.builder() is False
    assert config.log_level() == "debug"
    assert config.furniture() == DEFAULTS["furniture"]


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert DemoConfig(path).load_config() == DEFAULTS


def test_unknown_keys_are_ignored(tmp_path):
    path = write_yaml(tmp_path / "config.yaml", {"colour": "blue"})
    assert "colour" not in DemoConfig(path).load_config()


@pytest.mark.parametrize("content", [
    ["not", "a", "mapping"],
    {"builder": "yes"},
    {"logistics": "road"},
    {"log_level": "loud"},
    {"logistics": [1]},
    {"furniture": [None]},
    {"furniture": ["modern", ["victorian"]]},
])
def test_bad_config_raises(tmp_path, content):
    path = write_yaml(tmp_path / "config.yaml", content)
    with pytest.raises(ValueError):
        DemoConfig(path).load_config()


def test_bad_item_is_logged_before_raising(tmp_path, caplog):
    path = write_yaml(tmp_path / "config.yaml", {"logistics": ["road", 1]})
    with caplog.at_level(logging.ERROR, logger="utils.config"):
        with pytest.raises(ValueError, match="logistics"):
            DemoConfig(path).load_config()
    assert "logistics must be a list of names" in caplog.text


def test_broken_yaml_is_logged_and_raised(tmp_path, caplog):
    path = tmp_path / "config.yaml"
    path.write_text("builder: [unclosed\n", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="utils.config"):
        with pytest.raises(yaml.YAMLError):
            DemoConfig(path).load_config()
    assert "Configuration error" in caplog.text


def test_loaded_from(tmp_path):
    missing = DemoConfig(tmp_path / "absent.yaml")
    missing.load_config()
    assert missing.loaded_from() is None

    path = write_yaml(tmp_path / "config.yaml", {"builder": False})
    present = DemoConfig(path)
    assert present.loaded_from() is None
    present.load_config()
    assert present.loaded_from() == path


def test_defaults_are_not_shared(tmp_path):
    config = DemoConfig()
    config.logistics().append("air")
    assert DemoConfig().logistics() == ["road", "sea"]
    assert DEFAULTS["logistics"] == ["road", "sea"]


def test_override_log_level():
    config = DemoConfig()
    config.override_log_level("error")
    assert config.log_level() == "error"
    with pytest.raises(ValueError):
        config.override_log_level("verbose")


def test_create_yaml_config_writes_defaults(tmp_path, capsys):
    output = tmp_path / "config.yaml"
    assert create_yaml_config.main([str(output)]) == 0
    assert DemoConfig(output).load_config() == DEFAULTS
    assert "Created" in capsys.readouterr().out


def test_create_yaml_config_keeps_existing_file(tmp_path):
    output = tmp_path / "config.yaml"
    output.write_text("builder: false\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        create_yaml_config.main([str(output)])
    assert output.read_text(encoding="utf-8") == "builder: false\n"
