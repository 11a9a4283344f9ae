from __future__ import annotations

from pathlib import Path

import pytest

from usermanagement.config import (
    DEFAULT_MINIMUM_AGE,
    ServiceSettings,
    load_settings,
    resolve_config_path,
)


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "absent.yaml")
    assert settings == ServiceSettings()
    assert settings.minimum_age == DEFAULT_MINIMUM_AGE


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_settings(config_path).minimum_age == 18


def test_minimum_age_is_read_from_users_section(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("users:\n  minimum_age: 21\n", encoding="utf-8")

    assert load_settings(config_path).minimum_age == 21


def test_non_mapping_document_is_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_settings(config_path)


@pytest.mark.parametrize("value", ["abc", 0, -3, True, 18.9])
def test_invalid_minimum_age_is_rejected(value: object) -> None:
    with pytest.raises(ValueError):
        ServiceSettings.from_dict({"minimum_age": value})


def test_resolve_config_path_prefers_env_value(tmp_path: Path) -> None:
    target = tmp_path / "custom.yaml"
    assert resolve_config_path(str(target)) == target.resolve()


def test_resolve_config_path_default_points_at_repo_config() -> None:
    default = resolve_config_path(None)
    assert default.name == "settings.yaml"
    assert default.parent.name == "config"


def test_whole_number_float_is_accepted() -> None:
    assert ServiceSettings.from_dict({"minimum_age": 21.0}).minimum_age == 21


def test_malformed_yaml_is_reported_as_value_error(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("users: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration file"):
        load_settings(config_path)
