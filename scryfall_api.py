"""
Scryfall card lookups for MtgDeck2Pdf.
"""

from typing import Any, Iterator, List, NamedTuple, Optional
from urllib.parse import quote

import requests

from config import DEFAULT_IMAGE_TYPE, SCRYFALL_NAMED_URL
from errors import ResolutionError

class CardImageLocator(NamedTuple):
    """Image URLs for one card. back is only set for double-faced cards."""
    front: Optional[str]
    back: Optional[str] = None

    def image_slots(self) -> Iterator[Optional[str]]:
        """Yields the slots to fetch: always the front (None means card back), then the back if present."""
        yield self.front
        if self.back is not None:
            yield self.back

def build_named_url(card_name: str, set_code: Optional[str] = None) -> str:
    url = f"{SCRYFALL_NAMED_URL}?fuzzy={quote(card_name, safe='')}"
    if set_code:
        url += f"&set={quote(set_code, safe='')}"
    return url

def _image_url(image_uris: Any, image_type: str) -> Optional[str]:
    if not isinstance(image_uris, dict) or image_type not in image_uris:
        return None
    url = image_uris[image_type]
    if not isinstance(url, str):
        raise ResolutionError("Image URL is not a valid string")
    return url

def extract_image_locator(data: Any, image_type: str = DEFAULT_IMAGE_TYPE) -> CardImageLocator:
    """
    Picks the image URLs out of a Scryfall card object.

    Single-faced cards carry a top-level 'image_uris' object. Double-faced
    cards carry a 'card_faces' list, each face with its own 'image_uris';
    the first two faces found become front and back.
    """
    if not isinstance(data, dict):
        raise ResolutionError("Unexpected JSON response: not an object")

    front_url = _image_url(data.get("image_uris"), image_type)
    if front_url is not None:
        return CardImageLocator(front=front_url, back=None)

    card_faces = data.get("card_faces")
    if isinstance(card_faces, list):
        face_urls: List[str] = []
        for card_face in card_faces:
            image_uris = card_face.get("image_uris") if isinstance(card_face, dict) else None
            if not isinstance(image_uris, dict):
                raise ResolutionError("Field 'image_uris' not found in JSON response")
            url = _image_url(image_uris, image_type)
            if url is not None:
                face_urls.append(url)
            if len(face_urls) == 2:
                break
        if len(face_urls) == 2:
            return CardImageLocator(front=face_urls[0], back=face_urls[1])
        return CardImageLocator(front=face_urls[0] if face_urls else None, back=None)

    raise ResolutionError("Image URLs not found in JSON response")

def resolve_card(
    session: requests.Session,
    card_name: str,
    set_code: Optional[str] = None,
    image_type: str = DEFAULT_IMAGE_TYPE,
    timeout: Optional[float] = None,
    debug: bool = False
) -> CardImageLocator:
    """
    Looks a card up by fuzzy name (and set, if given) and returns its image URLs.
    Raises ResolutionError if the request fails or the response has no usable images.
    """
    url = build_named_url(card_name, set_code)
    if debug: print(f"DEBUG: [Scryfall API] Requesting image URL from: '{url}'")
    try:
        r = session.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise ResolutionError(f"Failed to make request to Scryfall API: {e}") from e

    if debug: print(f"DEBUG: [Scryfall API] Response status: {r.status_code}")
    if not 200 <= r.status_code < 300:
        raise ResolutionError(f"Failed to retrieve card data. Status Code: {r.status_code}")

    try:
        data = r.json()
    except ValueError as e:
        raise ResolutionError(f"Failed to parse JSON response: {e}") from e

    return extract_image_locator(data, image_type)
