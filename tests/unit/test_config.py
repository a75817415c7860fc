"""Unit tests for wputils.config module."""

from pathlib import Path

import pytest

from wputils import config

# pylint: disable=magic-value-comparison


def test_get_site_url(monkeypatch):
    """The site URL comes from the environment."""
    monkeypatch.setenv("WPUTILS_SITE_URL", "https://example.com")
    assert config.get_site_url() == "https://example.com"


@pytest.mark.parametrize("value", [None, ""])
def test_get_site_url_unset(monkeypatch, value):
    """Unset and empty values are both errors."""
    if value is not None:
        monkeypatch.setenv("WPUTILS_SITE_URL", value)
    with pytest.raises(config.SiteUrlNotSetError):
        config.get_site_url()


def test_theme_directories(monkeypatch, tmp_path):
    """The template directory falls back to the stylesheet directory."""
    monkeypatch.setenv("WPUTILS_STYLESHEET_DIR", str(tmp_path / "child"))
    assert config.get_stylesheet_directory() == tmp_path / "child"
    assert config.get_template_directory() == tmp_path / "child"
    monkeypatch.setenv("WPUTILS_TEMPLATE_DIR", str(tmp_path / "parent"))
    assert config.get_template_directory() == tmp_path / "parent"
    assert isinstance(config.get_template_directory(), Path)


def test_theme_directories_unset():
    """Without configuration both lookups fail."""
    with pytest.raises(config.ThemeDirNotSetError, match="WPUTILS_STYLESHEET_DIR"):
        config.get_stylesheet_directory()
    with pytest.raises(config.ThemeDirNotSetError):
        config.get_template_directory()


def test_template_directory_uri(monkeypatch):
    """Trailing slashes are removed from the template URI."""
    monkeypatch.setenv("WPUTILS_TEMPLATE_URI", "https://example.com/theme//")
    assert config.get_template_directory_uri() == "https://example.com/theme"
    monkeypatch.delenv("WPUTILS_TEMPLATE_URI")
    with pytest.raises(config.TemplateUriNotSetError):
        config.get_template_directory_uri()


def test_errors_share_a_base():
    """Configuration errors can be caught together."""
    for error in (
        config.SiteUrlNotSetError,
        config.ThemeDirNotSetError,
        config.TemplateUriNotSetError,
    ):
        assert issubclass(error, config.ConfigError)


def test_describe_settings(monkeypatch, tmp_path):
    """Every setting is listed by variable name; missing ones are marked."""
    monkeypatch.setenv("WPUTILS_STYLESHEET_DIR", str(tmp_path))
    monkeypatch.setenv("WPUTILS_SITE_URL", "https://example.com")
    assert config.describe_settings() == {
        "WPUTILS_SITE_URL": "https://example.com",
        "WPUTILS_STYLESHEET_DIR": str(tmp_path),
        "WPUTILS_TEMPLATE_DIR": str(tmp_path),
        "WPUTILS_TEMPLATE_URI": "<not set>",
    }
