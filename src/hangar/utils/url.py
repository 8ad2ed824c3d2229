"""
URL construction utilities.
"""

from urllib.parse import quote, urlparse


def normalize_api_url(api_url: str) -> str:
    """
    Normalize a target API URL.

    Strips trailing slashes and defaults to https when no scheme is given.

    Args:
        api_url: The URL as entered by the user (e.g. ci.example.com/)

    Returns:
        Normalized URL (e.g. https://ci.example.com)
    """
    api_url = (api_url or "").strip().rstrip("/")
    if api_url and not urlparse(api_url).scheme:
        api_url = f"https://{api_url}"
    return api_url


def construct_api_url(api_url: str, path: str) -> str:
    """Join the target API URL with an endpoint path"""
    path = path or ""
    if not path.startswith("/"):
        path = "/" + path
    return f"{api_url.rstrip('/')}{path}"


def path_segment(value: str) -> str:
    """Quote a team or pipeline name for use inside a URL path"""
    return quote(value, safe="")
