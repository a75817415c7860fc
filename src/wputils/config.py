"""Configuration utilities for wputils.

Settings are read from the environment on every call so that tests and
long-running scripts can change them without reloading the module.
"""

import os
from pathlib import Path

TEMPLATE_CACHE_TTL = 3600  # seconds

SITE_URL_ENV = "WPUTILS_SITE_URL"
STYLESHEET_DIR_ENV = "WPUTILS_STYLESHEET_DIR"
TEMPLATE_DIR_ENV = "WPUTILS_TEMPLATE_DIR"
TEMPLATE_URI_ENV = "WPUTILS_TEMPLATE_URI"

NOT_SET = "<not set>"


class ConfigError(Exception):
    """Base class for configuration errors."""


class SiteUrlNotSetError(ConfigError):
    """Raised when the WPUTILS_SITE_URL environment variable is not set."""


class ThemeDirNotSetError(ConfigError):
    """Raised when no theme directory is configured."""


class TemplateUriNotSetError(ConfigError):
    """Raised when the WPUTILS_TEMPLATE_URI environment variable is not set."""


def get_site_url() -> str:
    """Get the URL of the local site.

    Returns:
        The value of the `WPUTILS_SITE_URL` environment variable.

    Raises:
        SiteUrlNotSetError: If `WPUTILS_SITE_URL` is not set.
    """
    if not (url := os.environ.get(SITE_URL_ENV)):
        raise SiteUrlNotSetError
    return url


def get_stylesheet_directory() -> Path:
    """Get the active (child) theme directory.

    Raises:
        ThemeDirNotSetError: If `WPUTILS_STYLESHEET_DIR` is not set.
    """
    if not (directory := os.environ.get(STYLESHEET_DIR_ENV)):
        raise ThemeDirNotSetError(f"{STYLESHEET_DIR_ENV} is not set")
    return Path(directory)


def get_template_directory() -> Path:
    """Get the parent theme directory.

    Falls back to the stylesheet directory when `WPUTILS_TEMPLATE_DIR` is not
    set, as for a theme without a parent.

    Raises:
        ThemeDirNotSetError: If neither directory is set.
    """
    if directory := os.environ.get(TEMPLATE_DIR_ENV):
        return Path(directory)
    return get_stylesheet_directory()


def get_template_directory_uri() -> str:
    """Get the public base URI of the parent theme, without trailing slash.

    Raises:
        TemplateUriNotSetError: If `WPUTILS_TEMPLATE_URI` is not set.
    """
    if not (uri := os.environ.get(TEMPLATE_URI_ENV)):
        raise TemplateUriNotSetError
    return uri.rstrip("/")


def describe_settings() -> dict[str, str]:
    """Report each theme setting as its environment variable and value.

    Unset values are reported as ``<not set>``; the template directory shows
    the stylesheet directory it falls back to.
    """
    getters = {
        SITE_URL_ENV: get_site_url,
        STYLESHEET_DIR_ENV: get_stylesheet_directory,
        TEMPLATE_DIR_ENV: get_template_directory,
        TEMPLATE_URI_ENV: get_template_directory_uri,
    }
    settings = {}
    for name, getter in getters.items():
        try:
            settings[name] = str(getter())
        except ConfigError:
            settings[name] = NOT_SET
    return settings
