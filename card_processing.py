"""
Card processing logic for MtgDeck2Pdf.
"""

import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, NamedTuple, Optional, Sequence, Tuple

import requests
from PIL import Image

from config import DEFAULT_IMAGE_TYPE, LAYOUT_CHOICES, LAYOUT_GRID, REQUEST_DELAY_SECONDS
from errors import ImageFetchError, ResolutionError, SchedulingFault
from image_handler import ImageSource
from parsing_utils import DecklistEntry
from scryfall_api import CardImageLocator, resolve_card

class FetchResult(NamedTuple):
    """Outcome of one image fetch: image is set on success, error on failure."""
    source: ImageSource
    image: Optional[Image.Image] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.image is not None

class DeckImages(NamedTuple):
    results: List[FetchResult]
    missing_cards: List[str]
    request_count: int

def describe_entry(entry: DecklistEntry) -> str:
    return f"{entry.card_name} ({entry.set_code})" if entry.set_code else entry.card_name

def image_sources_for(entry: DecklistEntry, locator: CardImageLocator, layout: str) -> List[ImageSource]:
    """
    Turns a resolved card into the images to print. Grid layout only has room
    for fronts; single layout prints the back of a double-faced card on the
    following page.
    """
    name = describe_entry(entry)
    if layout == LAYOUT_GRID:
        return [ImageSource(locator.front, label=f"{name} [front]")]
    labels = ("front", "back")
    return [ImageSource(url, label=f"{name} [{labels[i]}]") for i, url in enumerate(locator.image_slots())]

def fetch_image_task(session: requests.Session, source: ImageSource, timeout: Optional[float] = None, debug: bool = False) -> FetchResult:
    """Worker body. Bad card data becomes a failed FetchResult; anything else propagates."""
    try:
        image = source.load(session, timeout=timeout, debug=debug)
    except (ImageFetchError, OSError) as e:
        return FetchResult(source=source, error=str(e))
    return FetchResult(source=source, image=image)

def collect_results(futures: Sequence[Tuple[ImageSource, "Future[FetchResult]"]]) -> List[FetchResult]:
    """Waits for every fetch in submission order. A task that raised aborts the batch."""
    results: List[FetchResult] = []
    for source, future in futures:
        try:
            results.append(future.result())
        except Exception as e:
            raise SchedulingFault(f"Fetch task for {source.label} failed unexpectedly: {e}") from e
    return results

def process_deck_list(
    entries: Sequence[DecklistEntry],
    session: requests.Session,
    layout: str,
    image_type: str = DEFAULT_IMAGE_TYPE,
    request_delay: float = REQUEST_DELAY_SECONDS,
    max_workers: Optional[int] = None,
    timeout: Optional[float] = None,
    debug: bool = False
) -> DeckImages:
    """
    Resolves every deck list entry in order and downloads its images.

    Lookups run one at a time with request_delay seconds between successful
    ones. Image downloads are handed to a thread pool as soon as their card is
    resolved. Cards that fail to resolve are reported and left out; the returned
    results follow deck list order, front before back.
    """
    if layout not in LAYOUT_CHOICES:
        raise ValueError(f"Invalid layout: '{layout}'. Supported: {', '.join(LAYOUT_CHOICES)}")

    missing_cards: List[str] = []
    request_count = 0
    futures: List[Tuple[ImageSource, "Future[FetchResult]"]] = []

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        for entry in entries:
            card_desc = describe_entry(entry)
            request_count += 1
            try:
                locator = resolve_card(session, entry.card_name, entry.set_code, image_type=image_type, timeout=timeout, debug=debug)
            except ResolutionError as e:
                print(f"  Error retrieving {image_type} url for card: {card_desc} => {e}")
                if debug: print(f"DEBUG: Deck list line {entry.line_num}: '{entry.original_line}'")
                missing_cards.append(card_desc)
                continue

            if locator.front is None:
                print(f"  Warning: No '{image_type}' image found for '{card_desc}'. Using card back.")
            for source in image_sources_for(entry, locator, layout):
                futures.append((source, executor.submit(fetch_image_task, session, source, timeout, debug)))
            print(f"Downloading image for card {card_desc}")

            time.sleep(request_delay)

        results = collect_results(futures)

    return DeckImages(results=results, missing_cards=missing_cards, request_count=request_count)
