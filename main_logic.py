"""
Main logic for MtgDeck2Pdf.
"""

import argparse
import time
from typing import List, Optional

import requests

from card_processing import process_deck_list
from config import DEFAULT_IMAGE_TYPE, IMAGE_TYPES, LAYOUT_CHOICES, LAYOUT_SINGLE, REQUEST_DELAY_SECONDS
from errors import ProxyError
from output_utils import document_title_for_deck_list, open_file_in_explorer, pdf_path_for_deck_list, write_missing_cards_file
from parsing_utils import read_decklist
from pdf_generator import create_pdf
from web_utils import create_session

def run(
    deck_list_path: str,
    layout: str = LAYOUT_SINGLE,
    padding_mm: float = 0.0,
    image_type: str = DEFAULT_IMAGE_TYPE,
    max_workers: Optional[int] = None,
    timeout: Optional[float] = None,
    request_delay: float = REQUEST_DELAY_SECONDS,
    write_missing: bool = False,
    session: Optional[requests.Session] = None,
    debug: bool = False
) -> str:
    """
    Turns a deck list file into <deck list name>.pdf next to it and returns
    the PDF path. Per-card problems are reported and skipped. Raises OSError
    for file-system problems and ProxyError subclasses for fatal pipeline errors.
    """
    start = time.perf_counter()

    print("--- Reading Deck List ---")
    decklist = read_decklist(deck_list_path, debug=debug)
    print(f"Found {len(decklist.entries)} card(s), skipped {len(decklist.skipped_lines)} line(s).")

    print("\n--- Resolving Cards ---")
    own_session = session is None
    if own_session:
        session = create_session()
    try:
        deck_images = process_deck_list(
            decklist.entries, session, layout,
            image_type=image_type,
            request_delay=request_delay,
            max_workers=max_workers,
            timeout=timeout,
            debug=debug
        )
    finally:
        if own_session:
            session.close()

    if deck_images.missing_cards:
        print(f"Could not resolve {len(deck_images.missing_cards)} card(s).")
        if write_missing:
            write_missing_cards_file(deck_list_path, deck_images.missing_cards)

    output_path = create_pdf(
        deck_images.results,
        pdf_path_for_deck_list(deck_list_path),
        layout,
        padding_mm=padding_mm,
        title=document_title_for_deck_list(deck_list_path),
        debug=debug
    )

    print(f"\nTotal number of scryfall requests: {deck_images.request_count}")
    print(f"Total processing time: {time.perf_counter() - start:.2f}s")
    return output_path

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a printable PDF of card images from a deck list.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter #type: ignore
    )
    parser.add_argument("deck_list", type=str, help="Path to deck list. Supports 'COUNT NAME' and 'COUNT NAME (SET)' lines.")

    layout_group = parser.add_argument_group('Layout Options')
    layout_group.add_argument("--layout", type=str, default=LAYOUT_SINGLE, choices=LAYOUT_CHOICES, help="'single' puts one card per page (and the back of double-faced cards on the next page). 'grid' packs card fronts 3x3 per page.")
    layout_group.add_argument("--padding-mm", type=float, default=0.0, help="[Grid Only] Space between cards in millimetres.")

    fetch_group = parser.add_argument_group('Download Options')
    fetch_group.add_argument("--image-type", type=str, default=DEFAULT_IMAGE_TYPE, choices=IMAGE_TYPES, help="Scryfall image variant to download.")
    fetch_group.add_argument("--workers", type=int, default=None, help="Maximum parallel image downloads. Defaults to the thread pool's own choice.")
    fetch_group.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds. No timeout by default.")

    general_group = parser.add_argument_group('General Options')
    general_group.add_argument("--write-missing", action="store_true", help="Write <deck list name>_missing.txt listing cards that could not be resolved.")
    general_group.add_argument("--open", action="store_true", help="Open the finished PDF with the system viewer.")
    general_group.add_argument("--debug", action="store_true", help="Enable detailed debug messages.")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.padding_mm < 0:
        parser.error("--padding-mm cannot be negative.")
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1.")

    try:
        output_path = run(
            args.deck_list,
            layout=args.layout,
            padding_mm=args.padding_mm,
            image_type=args.image_type,
            max_workers=args.workers,
            timeout=args.timeout,
            write_missing=args.write_missing,
            debug=args.debug
        )
    except OSError as e:
        print(f"Error: {e}")
        return 1
    except ProxyError as e:
        print(f"Error: {e}")
        return 1

    print(f"Saved PDF to path: {output_path}")
    if args.open:
        open_file_in_explorer(output_path)
    return 0
