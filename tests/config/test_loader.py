
import pytest
import yaml

from romdedup.config.loader import (
    ConfigError,
    DEFAULT_CONFIG,
    get_config_value,
    load_config,
    merge_config,
)


@pytest.mark.unit
def test_load_config_without_file_returns_defaults():
    config = load_config(None)

    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG
    config['paths']['romdir'] = '/elsewhere'
    assert DEFAULT_CONFIG['paths']['romdir'] == '.'


@pytest.mark.unit
def test_load_config_merges_file_over_defaults(tmp_path):
    cfg_path = tmp_path / "romdedup.yaml"
    cfg_path.write_text(yaml.safe_dump({
        "paths": {"romdir": "/roms/snes", "dupdir": "/roms/dupes"},
        "logging": {"level": "DEBUG"},
    }))

    config = load_config(cfg_path)

    assert config['paths'] == {
        'gamelist': 'gamelist.xml',
        'romdir': '/roms/snes',
        'dupdir': '/roms/dupes',
    }
    assert config['logging']['level'] == 'DEBUG'
    assert config['logging']['console'] is True


@pytest.mark.unit
def test_load_config_empty_file_returns_defaults(tmp_path):
    cfg_path = tmp_path / "empty.yaml"
    cfg_path.write_text("")

    assert load_config(cfg_path) == DEFAULT_CONFIG


@pytest.mark.unit
def test_load_config_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.unit
def test_load_config_invalid_yaml_raises(tmp_path):
    cfg_path = tmp_path / "bad.yaml"
    cfg_path.write_text("paths: [unclosed")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(cfg_path)


@pytest.mark.unit
def test_load_config_rejects_non_mapping(tmp_path):
    cfg_path = tmp_path / "list.yaml"
    cfg_path.write_text("- a\n- b\n")

    with pytest.raises(ConfigError, match="dictionary"):
        load_config(cfg_path)


@pytest.mark.unit
def test_merge_config_replaces_scalars_and_merges_dicts():
    base = {"a": {"x": 1, "y": 2}, "b": 1}
    merged = merge_config(base, {"a": {"y": 3}, "b": {"nested": True}})

    assert merged == {"a": {"x": 1, "y": 3}, "b": {"nested": True}}


@pytest.mark.unit
def test_get_config_value_dot_notation():
    config = {"paths": {"romdir": "/roms"}}

    assert get_config_value(config, "paths.romdir") == "/roms"
    assert get_config_value(config, "paths.missing", "fallback") == "fallback"
    assert get_config_value(config, "paths.romdir.deeper") is None
