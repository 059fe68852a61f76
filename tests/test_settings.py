import pytest
import yaml

from placeholders import DictSettingsStore, PolicySettings, YamlSettingsStore
from utils import config


def test_defaults_when_unset():
    assert PolicySettings.from_store(DictSettingsStore()) == PolicySettings(False, False)


def test_flags_read_by_name():
    store = DictSettingsStore({"only-locked": "on", "use-slots": 1})
    assert PolicySettings.from_store(store) == PolicySettings(only_locked=True, use_slots=True)


def test_unrecognised_value_falls_back_to_default():
    store = DictSettingsStore({"only-locked": "sometimes"})
    assert PolicySettings.from_store(store).only_locked is False


def test_yaml_store_reads_file(tmp_path):
    path = tmp_path / "placeholders.yaml"
    path.write_text("only-locked: true\nuse-slots: false\n")
    store = YamlSettingsStore(path)
    assert PolicySettings.from_store(store) == PolicySettings(only_locked=True)

    path.write_text("use-slots: true\n")
    store.reload()
    assert PolicySettings.from_store(store) == PolicySettings(use_slots=True)


def test_yaml_store_missing_or_empty_file(tmp_path):
    assert YamlSettingsStore(tmp_path / "nope.yaml").values == {}
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert YamlSettingsStore(empty).values == {}


def test_yaml_parse_errors_propagate(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("only-locked: [true\n")
    with pytest.raises(yaml.YAMLError):
        YamlSettingsStore(path)


def test_yaml_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- only-locked\n")
    with pytest.raises(ValueError):
        YamlSettingsStore(path)


def test_bundled_config_is_default(monkeypatch):
    monkeypatch.delenv(config.CONFIG_ENV, raising=False)
    store = YamlSettingsStore()
    assert store.path == config.DEFAULT_CONFIG_FILE
    assert PolicySettings.from_store(store) == PolicySettings()


def test_config_path_from_environment(monkeypatch, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("use-slots: yes\n")
    monkeypatch.setenv(config.CONFIG_ENV, str(path))
    assert PolicySettings.from_store(YamlSettingsStore()).use_slots is True
