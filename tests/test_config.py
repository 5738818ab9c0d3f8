import pytest

from gedcom_lossless.config import (
    DEFAULTS,
    ConfigError,
    get_config,
    load_config,
    reset_config,
)


def test_missing_file_uses_defaults(tmp_path):
    cfg = load_config(tmp_path / "missing.yml")

    assert cfg.source_format == DEFAULTS["parser"]["source_format"]
    assert cfg.custom_tag_prefix == "_"
    assert cfg.debug is False
    assert cfg.logging["to_file"] is False


def test_file_overrides_merge_with_defaults(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("debug: true\nparser:\n  source_format: gedcom551\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.debug is True
    assert cfg.source_format == "gedcom551"
    assert cfg.custom_tag_prefix == "_"
    assert cfg.logging["level"] == "WARNING"


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(path).source_format == "gedcom55"


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("parser: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_non_mapping_raises(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_get_config_is_cached_until_reset():
    first = get_config()
    assert get_config() is first

    reset_config()
    assert get_config() is not first
