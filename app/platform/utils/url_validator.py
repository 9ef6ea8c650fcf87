from urllib.parse import urlparse
from typing import Tuple


def normalize_url(url: str) -> Tuple[str, bool]:

    url = url.strip()

    if not url.startswith(("http://", "https://")):
        normalized = f"https://{url}"
        return normalized, True

    return url, False


def validate_url(url: str | None) -> Tuple[bool, str, str]:
    if not url or not url.strip():
        return False, "", "URL is required"

    normalized_url, _ = normalize_url(url)

    try:
        parsed = urlparse(normalized_url)

        if not parsed.netloc or not parsed.hostname:
            return False, normalized_url, "Invalid URL format: missing domain"

        if parsed.scheme not in ["http", "https"]:
            return False, normalized_url, f"Invalid URL scheme: {parsed.scheme} (must be http or https)"

        if any(char.isspace() for char in normalized_url):
            return False, normalized_url, "Invalid URL format: contains whitespace"

        # raises ValueError for out-of-range or non-numeric ports
        parsed.port

        return True, normalized_url, ""

    except ValueError as e:
        return False, normalized_url, f"URL parsing error: {str(e)}"
