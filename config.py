"""
Configuration constants for MtgDeck2Pdf.
"""

import os
from typing import Tuple

__version__ = "0.1.0"

# --- Page and card geometry (millimetres) ---
# A4 is the physical card stock target.
PAGE_WIDTH_MM = 210.0
PAGE_HEIGHT_MM = 297.0
CARD_WIDTH_MM = 63.0
CARD_HEIGHT_MM = 88.0

GRID_COLS = 3
GRID_ROWS = 3

LAYOUT_SINGLE = "single"
LAYOUT_GRID = "grid"
LAYOUT_CHOICES: Tuple[str, ...] = (LAYOUT_SINGLE, LAYOUT_GRID)

# --- Scryfall ---
SCRYFALL_NAMED_URL = "https://api.scryfall.com/cards/named"
DEFAULT_IMAGE_TYPE = "png"
IMAGE_TYPES: Tuple[str, ...] = ("png", "large", "normal", "border_crop")

# Pause after each successful lookup so the API is not hammered.
REQUEST_DELAY_SECONDS = 0.05

APP_USER_AGENT = f"MtgDeck2Pdf/{__version__}"
REQUEST_HEADERS = {
    "User-Agent": APP_USER_AGENT,
    "Accept": "application/json;q=0.9,*/*;q=0.8",
}

# --- Bundled assets ---
ASSET_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")
CARD_BACK_IMAGE_PATH = os.path.join(ASSET_DIR, "magic_card_back.png")

DEFAULT_DOCUMENT_TITLE = "MtgDeck2Pdf Proxies"
