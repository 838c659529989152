"""Download the markdown document over HTTP."""

from typing import Optional

import httpx

from .exceptions import FetchError


def fetch_markdown(url: str, client: Optional[httpx.Client] = None) -> str:
    """GET ``url`` and return the body as text.

    No retry; any transport, status or decode failure raises FetchError.
    """
    try:
        if client is None:
            response = httpx.get(url, follow_redirects=True)
        else:
            response = client.get(url, follow_redirects=True)
        response.raise_for_status()
        text = response.text
    except httpx.HTTPError as e:
        raise FetchError(f"{url}: {e}") from e
    except UnicodeDecodeError as e:
        raise FetchError(f"could not decode {url}: {e}") from e

    if not text:
        raise FetchError(f"empty response from {url}")

    return text
