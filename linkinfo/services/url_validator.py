import re
from urllib.parse import urlparse
from abc import ABC, abstractmethod

# Hostnames that resolve into the local network, blocked to prevent SSRF
PRIVATE_HOST_PATTERNS = [
    r"^127\.0\.0\.1",
    r"^localhost",
    r"^10\.",
    r"^172\.(1[6-9]|2[0-9]|3[0-1])\.",
    r"^192\.168\.",
    r"^::1$",
]


def is_absolute_http_url(url: str) -> bool:
    """Check that a string parses as an absolute http(s) URL with a host"""
    try:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return False
        # Accessing the port raises ValueError when it is out of range
        port = parsed.port
    except ValueError:
        return False
    if port is not None and port < 1:
        return False
    return bool(parsed.hostname)


class URLValidatorInterface(ABC):
    """Interface for URL validation following the Dependency Inversion Principle"""

    @abstractmethod
    def validate(self, url: str) -> bool:
        """
        Validate a URL to check if it's safe and properly formatted.

        Args:
            url: The URL string to validate

        Returns:
            True if the URL is valid and safe, False otherwise
        """
        pass


class URLValidator(URLValidatorInterface):
    """
    Validates URLs and prevents SSRF attacks.
    This class implements URL validation logic to ensure URLs are safe to access.
    """

    def __init__(self, block_private_hosts: bool = True):
        self.block_private_hosts = block_private_hosts

    def validate(self, url: str) -> bool:
        """
        Validate URL and check for potential SSRF attacks.

        Args:
            url: The URL string to validate

        Returns:
            True if the URL is valid and safe, False otherwise
        """
        if not url or not is_absolute_http_url(url.strip()):
            return False

        if not self.block_private_hosts:
            return True

        hostname = urlparse(url.strip()).hostname or ""
        for pattern in PRIVATE_HOST_PATTERNS:
            if re.match(pattern, hostname):
                return False

        return True
