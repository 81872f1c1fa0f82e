"""
Web utilities for MtgDeck2Pdf.
"""

from typing import Optional

import requests

from config import REQUEST_HEADERS
from errors import ImageDownloadError

def create_session() -> requests.Session:
    """Creates the HTTP session shared by every lookup and download of a run."""
    session = requests.Session()
    session.headers.update(REQUEST_HEADERS)
    return session

def download_image_bytes(session: requests.Session, url: str, timeout: Optional[float] = None, debug: bool = False) -> bytes:
    """Downloads the full payload at url. Raises ImageDownloadError on network or HTTP errors."""
    if debug: print(f"DEBUG: Downloading image from {url}")
    try:
        r = session.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise ImageDownloadError(f"Failed to fetch image from {url}: {e}") from e
    if not 200 <= r.status_code < 300:
        raise ImageDownloadError(f"Failed to fetch image from {url} (Status {r.status_code})")
    if debug: print(f"DEBUG: Downloaded {len(r.content)} bytes from {url}")
    return r.content
