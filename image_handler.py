"""
Image handling for MtgDeck2Pdf.
"""

import functools
import io
from typing import Optional

import requests
from PIL import Image

from config import CARD_BACK_IMAGE_PATH
from errors import DecodeError
from web_utils import download_image_bytes

WHITE_RGB = (255, 255, 255)
WHITE_L = 255

class ImageSource:
    """One image slot of a resolved card: a URL, or None for the bundled card back."""
    def __init__(self, url: Optional[str], label: str = ""):
        self.url = url
        self.label = label or (url if url else "card back")
    @property
    def is_card_back(self) -> bool:
        return self.url is None
    def load(self, session: requests.Session, timeout: Optional[float] = None, debug: bool = False) -> Image.Image:
        """Fetch and normalize this image"""
        return fetch_card_image(session, self.url, timeout=timeout, debug=debug)
    def __repr__(self) -> str:
        return f"ImageSource({self.label!r}, url={self.url!r})"

def remove_alpha_channel(image: Image.Image) -> Image.Image:
    """
    Flattens any transparency onto a white background, the colour of the paper.

    RGBA becomes RGB and LA becomes L, each channel blended as
    (1 - a) * 255 + a * c with a = alpha / 255. RGB and L images are returned
    as-is, so applying this twice is the same as applying it once.
    """
    if image.mode in ("RGB", "L"):
        return image

    if image.mode == "P" and "transparency" in image.info:
        image = image.convert("RGBA")
    elif image.mode in ("PA", "RGBa"):
        image = image.convert("RGBA")
    elif image.mode == "La":
        image = image.convert("LA")

    if image.mode == "RGBA":
        background = Image.new("RGB", image.size, WHITE_RGB)
        background.paste(image.convert("RGB"), mask=image.getchannel("A"))
        return background
    if image.mode == "LA":
        background = Image.new("L", image.size, WHITE_L)
        background.paste(image.getchannel("L"), mask=image.getchannel("A"))
        return background

    # Remaining modes (P without transparency, CMYK, I, 1, ...) carry no alpha.
    return image.convert("RGB")

def decode_image(data: bytes, source: str = "image") -> Image.Image:
    """Decodes image bytes fully. Raises DecodeError if Pillow cannot read them."""
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Failed to decode {source}: {e}") from e
    return img

@functools.lru_cache(maxsize=None)
def load_card_back() -> Image.Image:
    """The bundled card back, decoded and flattened once per process. Treat as read-only."""
    with open(CARD_BACK_IMAGE_PATH, "rb") as f:
        data = f.read()
    return remove_alpha_channel(decode_image(data, source="card back image"))

def fetch_card_image(session: requests.Session, url: Optional[str], timeout: Optional[float] = None, debug: bool = False) -> Image.Image:
    """
    Returns a printable, alpha-free image for url, or the card back if url is None.
    Raises ImageDownloadError or DecodeError for a bad URL.
    """
    if url is None:
        if debug: print("DEBUG: [Download] Using local card back image.")
        return load_card_back().copy()
    data = download_image_bytes(session, url, timeout=timeout, debug=debug)
    return remove_alpha_channel(decode_image(data, source=url))
