from typing import Tuple
from urllib.parse import unquote, urlparse

LOCAL_SCHEMES = ("", "file")
RESOURCE_SCHEMES = ("classpath", "resource")
REMOTE_SCHEMES = ("http", "https")


def parse_resource_uri(uri: str) -> Tuple[str, str]:
    """
    Splits a resource URI into its scheme and location.

    Supports plain paths, file:// URIs, classpath:// and resource:// URIs
    (location relative to a resource root) and http(s):// URLs (location is
    the full URL).
    """
    parsed_url = urlparse(str(uri))
    scheme = parsed_url.scheme.lower()

    # Windows drive letters ("C:\\images\\logo.png") parse as a one-letter scheme
    if len(scheme) == 1:
        return "", str(uri)

    if scheme == "":
        return "", str(uri)

    if scheme == "file":
        path = unquote(parsed_url.path)
        if parsed_url.netloc and parsed_url.netloc != "localhost":
            path = f"//{parsed_url.netloc}{path}"
        return scheme, path

    if scheme in RESOURCE_SCHEMES:
        location = f"{parsed_url.netloc}{unquote(parsed_url.path)}"
        return scheme, location.lstrip("/")

    return scheme, str(uri)
