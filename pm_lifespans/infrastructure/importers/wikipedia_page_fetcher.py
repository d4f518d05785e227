"""Wikipedia page fetcher with an on-disk cache.

The fetched HTML is stored under the cache directory and reused on later
runs, so repeated analyses do not hit the network.
"""

import re
import urllib.error
import urllib.request

from pathlib import Path
from urllib.parse import unquote, urlparse

from pm_lifespans.common.logging import get_logger
from pm_lifespans.domain.exceptions import FetchError
from pm_lifespans.infrastructure.config.settings import DEFAULT_USER_AGENT


logger = get_logger(__name__)

_SLUG_UNSAFE = re.compile(r"[^A-Za-z0-9._-]+")


def cache_path_for(url: str, cache_dir: Path) -> Path:
    """Return the cache file path for ``url``.

    "https://en.wikipedia.org/wiki/List_of_X" → cache_dir/List_of_X.html
    """
    parsed = urlparse(url)
    last_segment = unquote(parsed.path.rstrip("/").rsplit("/", 1)[-1])
    slug = _SLUG_UNSAFE.sub("_", last_segment).strip("_") or parsed.netloc
    return cache_dir / f"{slug}.html"


def _decode(content: bytes) -> str:
    for encoding in ["utf-8", "cp1252"]:
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            continue
    return content.decode("utf-8", errors="replace")


def fetch_html(
    url: str,
    timeout: float = 30.0,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """Fetch ``url`` and return the decoded body.

    Raises:
        FetchError: non-200 status or transport failure
    """
    logger.info("fetching %s", url)
    req = urllib.request.Request(url, headers={"User-Agent": user_agent})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:  # noqa: S310
            status = getattr(response, "status", 200)
            if status != 200:
                msg = f"Unexpected status {status} for {url}"
                raise FetchError(msg, url=url, status_code=status)
            content = response.read()
    except urllib.error.HTTPError as e:
        msg = f"HTTP {e.code} while fetching {url}"
        raise FetchError(msg, url=url, status_code=e.code) from e
    except (urllib.error.URLError, TimeoutError) as e:
        msg = f"Could not fetch {url}: {e}"
        raise FetchError(msg, url=url) from e

    return _decode(content)


def fetch_cached_html(
    url: str,
    cache_dir: Path,
    refresh: bool = False,
    timeout: float = 30.0,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """Return the page HTML, reading from the cache when possible.

    Args:
        url: Page URL
        cache_dir: Directory holding cached pages
        refresh: Ignore any cached copy and re-fetch
        timeout: Request timeout in seconds
        user_agent: User-Agent header sent with the request

    Returns:
        Page HTML
    """
    path = cache_path_for(url, cache_dir)

    if not refresh and path.exists() and path.stat().st_size > 0:
        logger.info("using cached copy: %s", path)
        return path.read_text(encoding="utf-8")

    html = fetch_html(url, timeout=timeout, user_agent=user_agent)

    cache_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    logger.info("cached %d characters at %s", len(html), path)
    return html
