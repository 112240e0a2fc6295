"""Network fetch helpers for the airline code scraper."""
import random

import requests

from utils.constants import (
    ASSET_BASE_URL,
    ASSET_URL_SUFFIX,
    REQUEST_TIMEOUT,
    USER_AGENTS,
    WIKI_BASE_PATH,
)


def _get_random_user_agent() -> str:
    """Return a random user agent."""
    return random.choice(USER_AGENTS)


def build_page_url(suffix: str) -> str:
    """Return the list page URL for a suffix, e.g. `..._codes_(A)`."""
    return f"{WIKI_BASE_PATH}({suffix})"


def build_asset_url(code: str) -> str:
    return f"{ASSET_BASE_URL}{code}{ASSET_URL_SUFFIX}"


def fetch_section_page(session: requests.Session, suffix: str):
    """Fetch the list page for one suffix. Raises on non-2xx responses."""
    headers = {
        'User-Agent': _get_random_user_agent(),
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    }
    response = session.get(build_page_url(suffix), headers=headers, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response


def fetch_asset(session: requests.Session, url: str):
    """Fetch an image asset. The status is left for the caller to inspect."""
    headers = {
        'User-Agent': _get_random_user_agent(),
        'Accept': 'image/svg+xml,image/*;q=0.8,*/*;q=0.5',
    }
    return session.get(url, headers=headers, timeout=REQUEST_TIMEOUT)
