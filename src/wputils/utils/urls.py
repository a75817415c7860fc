"""URL classification helpers."""

import re
from urllib.parse import urlparse

from wputils import config

HYPERTEXT_EXTENSIONS = ("php", "html", "htm")

_EXTENSION = re.compile(r"\.([a-zA-Z]{3,4})$")


def get_domain_of_url(url: str, include_subdomains: bool | int = False) -> str:
    """Return the host of *url*, trimmed to its registrable domain.

    Args:
        url: Absolute URL.
        include_subdomains: Number of subdomain labels to keep in front of the
            ``name.tld`` pair. ``True`` keeps them all.

    Returns:
        str: Lowercase domain, or ``""`` if the URL has no host.

    Examples:
        ``get_domain_of_url("https://a.b.example.com/x")`` is ``"example.com"``;
        with ``include_subdomains=1`` it is ``"b.example.com"``.
    """
    host = urlparse(url).hostname
    if not host:
        return ""
    labels = host.split(".")
    if include_subdomains is True:
        return host
    keep = max(int(include_subdomains), 0) + 2
    return ".".join(labels[-keep:])


def is_link_external(
    url: str, site_url: str | None = None, allow_subdomains: bool = True
) -> bool:
    """Return True if *url* most likely points away from the site.

    URLs without a host are relative and therefore local.

    Args:
        url: URL to check.
        site_url: The site's own URL; read from the environment by default.
        allow_subdomains: Treat any subdomain of the site's domain as local.
            Otherwise only the bare domain and its ``www.`` form are local.

    Raises:
        SiteUrlNotSetError: If *site_url* is omitted and not configured.
    """
    url_domain = get_domain_of_url(url, True)
    if not url_domain:
        return False
    if site_url is None:
        site_url = config.get_site_url()
    local_domain = get_domain_of_url(site_url)
    if url_domain == local_domain:
        return False
    if allow_subdomains:
        return not url_domain.endswith(f".{local_domain}")
    return url_domain != f"www.{local_domain}"


def is_link_asset(url: str, exts: tuple[str, ...] | list[str] = ()) -> bool:
    """Return True if the path of *url* ends in a file extension of interest.

    Args:
        url: URL to check; the query string and fragment are ignored.
        exts: Extensions (without dot) that count as assets. When empty, any
            3-4 letter extension except ``php``, ``html`` and ``htm`` counts.
    """
    path = urlparse(url).path
    if not path:
        return False
    match = _EXTENSION.search(path)
    if not match:
        return False
    extension = match.group(1).lower()
    if exts:
        return extension in (ext.lower() for ext in exts)
    return extension not in HYPERTEXT_EXTENSIONS


def is_link_relative(url: str) -> bool:
    """Return True if *url* has no host."""
    return not urlparse(url).hostname
