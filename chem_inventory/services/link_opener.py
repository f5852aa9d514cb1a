"""
Link Opener

Hands SDS links to whatever handler the host has for URLs.
"""

import logging
import webbrowser
from typing import Protocol
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


class LinkOpener(Protocol):
    def open(self, url: str) -> bool:
        """Open `url`; return False if it could not be handed off."""
        ...


def is_openable_url(url: str) -> bool:
    parsed = urlparse(url)
    return bool(parsed.scheme and parsed.netloc)


class BrowserLinkOpener:
    """Opens links in the default browser of the host running the service."""

    def open(self, url: str) -> bool:
        if not is_openable_url(url):
            logger.warning(f"Refusing to open malformed URL: {url!r}")
            return False

        try:
            opened = webbrowser.open(url)
        except webbrowser.Error as e:
            logger.error(f"Failed to open {url}: {e}")
            return False

        if not opened:
            logger.warning(f"No browser available to open {url}")
        return opened
