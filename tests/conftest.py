import io
import re
from typing import Any, Callable, Dict, Iterable, List, Optional
from urllib.parse import parse_qs, urlparse

import pytest
from PIL import Image

from config import SCRYFALL_NAMED_URL


class FakeResponse:
    """Just enough of requests.Response for the code under test."""

    def __init__(self, status_code: int = 200, json_data: Any = None, content: bytes = b"", bad_json: bool = False) -> None:
        self.status_code = status_code
        self._json_data = json_data
        self.content = content
        self._bad_json = bad_json

    def json(self) -> Any:
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json_data


class FakeSession:
    """Serves Scryfall lookups from `cards` (keyed by fuzzy name) and images from `images` (keyed by URL)."""

    def __init__(self, cards: Optional[Dict[str, Any]] = None, images: Optional[Dict[str, bytes]] = None) -> None:
        self.cards = cards or {}
        self.images = images or {}
        self.calls: List[str] = []
        self.closed = False

    def get(self, url: str, timeout: Optional[float] = None) -> FakeResponse:
        self.calls.append(url)
        if url.startswith(SCRYFALL_NAMED_URL):
            name = parse_qs(urlparse(url).query)["fuzzy"][0]
            if name in self.cards:
                return FakeResponse(200, self.cards[name])
            return FakeResponse(404, {"object": "error", "code": "not_found"})
        if url in self.images:
            return FakeResponse(200, content=self.images[url])
        return FakeResponse(404, content=b"")

    def close(self) -> None:
        self.closed = True


def count_pdf_pages(path) -> int:
    with open(path, "rb") as f:
        return len(re.findall(rb"/Type /Page\b", f.read()))


def png_bytes(mode: str = "RGB", color: Any = (200, 30, 30), size=(63, 88)) -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format="PNG")
    return buf.getvalue()


def single_faced_card(name: str, png_url: str) -> Dict[str, Any]:
    return {
        "object": "card",
        "name": name,
        "image_uris": {"small": png_url + "?small", "normal": png_url + "?normal", "png": png_url},
    }


def double_faced_card(name: str, front_url: str, back_url: str) -> Dict[str, Any]:
    return {
        "object": "card",
        "name": name,
        "card_faces": [
            {"name": name.split(" // ")[0], "image_uris": {"png": front_url}},
            {"name": name.split(" // ")[-1], "image_uris": {"png": back_url}},
        ],
    }


@pytest.fixture
def make_png() -> Callable[..., bytes]:
    return png_bytes


@pytest.fixture
def sample_deck_session() -> FakeSession:
    """One single-faced card and one double-faced card, both with downloadable images."""
    cards = {
        "Tayam, Luminous Enigma": single_faced_card(
            "Tayam, Luminous Enigma", "https://cards.example/tayam.png"
        ),
        "Delver of Secrets": double_faced_card(
            "Delver of Secrets // Insectile Aberration",
            "https://cards.example/delver-front.png",
            "https://cards.example/delver-back.png",
        ),
    }
    images = {
        "https://cards.example/tayam.png": png_bytes("RGBA", (10, 120, 40, 255)),
        "https://cards.example/delver-front.png": png_bytes("RGB", (20, 20, 160)),
        "https://cards.example/delver-back.png": png_bytes("RGB", (160, 20, 20)),
    }
    return FakeSession(cards, images)


@pytest.fixture
def write_deck_list(tmp_path) -> Callable[[Iterable[str]], str]:
    def _write(lines: Iterable[str], name: str = "deck.txt") -> str:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return _write
