"""Tests for site configuration loading and layer root resolution."""
from __future__ import annotations

import logging

import pytest

from strata.core.config import ConfigManager
from strata.core.exceptions import ConfigError, SitePathError
from strata.core.paths import SitePaths
from strata.core.schemas import SchemaValidationError, validate_payload_safe


def test_bundled_defaults_apply_without_site_config(site):
    cfg = ConfigManager(site.base, environ={}).load_config()

    assert cfg["base_url"] == "/"
    assert cfg["theme"] is None
    assert cfg["widgets"]["comments"]["use"] == "default"
    assert cfg["widgets"]["analytics"]["enable"] == "false"


def test_site_config_is_deep_merged_over_defaults(site):
    site.write_config(
        {
            "base_url": "/blog/",
            "widgets": {"analytics": {"enable": True, "tracking_id": "G-42"}},
            "posts": {"exclude": ["^draft_"]},
        }
    )

    cfg = ConfigManager(site.base, environ={}).load_config()

    assert cfg["base_url"] == "/blog/"
    assert cfg["widgets"]["analytics"] == {"enable": True, "tracking_id": "G-42"}
    assert cfg["widgets"]["comments"] == {"use": "default"}
    assert cfg["posts"]["exclude"] == ["^draft_"]


def test_config_yml_is_accepted(site):
    (site.base / "config.yml").write_text("theme: twenty\n", encoding="utf-8")

    assert ConfigManager(site.base, environ={}).load_config()["theme"] == "twenty"


def test_invalid_yaml_is_a_config_error(site):
    (site.base / "config.yaml").write_text("base_url: [oops\n", encoding="utf-8")

    with pytest.raises(ConfigError) as exc_info:
        ConfigManager(site.base, environ={}).load_config()

    assert exc_info.value.context["path"].endswith("config.yaml")


def test_non_mapping_config_is_a_config_error(site):
    (site.base / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="must contain a YAML mapping"):
        ConfigManager(site.base, environ={}).load_config()


def test_env_overrides_are_typed_and_nested(site):
    environ = {
        "STRATA_BASE_URL": "/preview/",
        "STRATA_WIDGETS__ANALYTICS__ENABLE": "true",
        "STRATA_WIDGETS__COMMENTS__LIMIT": "5",
        "STRATA_WIDGETS__NAMES": '["comments"]',
        "UNRELATED": "x",
    }

    cfg = ConfigManager(site.base, environ=environ).load_config()

    assert cfg["base_url"] == "/preview/"
    assert cfg["widgets"]["analytics"]["enable"] is True
    assert cfg["widgets"]["comments"]["LIMIT"] == 5
    assert cfg["widgets"]["names"] == ["comments"]


def test_env_overrides_can_be_skipped(site):
    cfg = ConfigManager(site.base, environ={"STRATA_THEME": "dark"}).load_config(include_env=False)

    assert cfg["theme"] is None


def test_env_overrides_read_the_process_environment(site, monkeypatch):
    monkeypatch.setenv("STRATA_THEME", "dark")

    assert ConfigManager(site.base).load_config()["theme"] == "dark"


def test_malformed_env_key_is_rejected(site):
    with pytest.raises(ConfigError, match="Malformed"):
        ConfigManager(site.base, environ={"STRATA_WIDGETS____X": "1"}).load_config()


def test_schema_validation_reports_locations(site):
    site.write_config({"base_url": 42, "widgets": {"names": "comments"}})

    with pytest.raises(SchemaValidationError) as exc_info:
        ConfigManager(site.base, environ={}).load_config(validate=True)

    errors = exc_info.value.errors
    assert any(e.startswith("base_url:") for e in errors)
    assert any(e.startswith("widgets.names:") for e in errors)
    assert isinstance(exc_info.value, ConfigError)


def test_valid_config_passes_schema():
    assert validate_payload_safe({"base_url": "/", "theme": None, "pages": {"exclude": []}}, "config.schema") == []


def test_site_paths_without_theme(site):
    paths = SitePaths.resolve(site.base, {}, system_root=site.system)

    assert [l.name for l in paths.layers()] == ["system", "base"]
    assert paths.theme is None
    assert paths.layer_by_name("theme") is None


def test_site_paths_with_existing_theme(site):
    site.theme.mkdir(parents=True)

    paths = SitePaths.resolve(site.base, {"theme": site.theme_name}, system_root=site.system)

    assert paths.layer_by_name("theme").path == site.theme.resolve()
    assert paths.layers()[-1].to_dict() == {"name": "theme", "path": str(site.theme.resolve())}


def test_missing_theme_directory_is_logged_and_skipped(site, caplog):
    with caplog.at_level(logging.WARNING):
        paths = SitePaths.resolve(site.base, {"theme": "ghost"}, system_root=site.system)

    assert paths.theme is None
    assert "Theme 'ghost' is configured" in caplog.text


def test_missing_site_root_is_an_error(site):
    with pytest.raises(SitePathError) as exc_info:
        SitePaths.resolve(site.root / "nope", {})

    assert isinstance(exc_info.value, FileNotFoundError)


def test_bundled_system_layer_is_the_default(site):
    paths = SitePaths.resolve(site.base, {})

    assert (paths.system / "widgets" / "comments" / "default.html").is_file()


def test_new_context_loads_config_from_disk(site):
    site.write_config({"base_url": "/docs/"})

    ctx = site.context()

    assert ctx.config["base_url"] == "/docs/"
    assert ctx.to_url("pages", "about") == "/docs/pages/about"
