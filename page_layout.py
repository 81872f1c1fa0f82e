"""
Page layout for MtgDeck2Pdf.

All positions are in millimetres with the origin at the bottom-left corner of
the page, which is what the PDF canvas expects.
"""

from typing import List, NamedTuple, Sequence, Tuple

from PIL import Image

from card_processing import FetchResult
from config import (CARD_HEIGHT_MM, CARD_WIDTH_MM, GRID_COLS, GRID_ROWS, LAYOUT_CHOICES,
                    LAYOUT_GRID, LAYOUT_SINGLE, PAGE_HEIGHT_MM, PAGE_WIDTH_MM)

class LayoutSlot(NamedTuple):
    page_index: int
    x_mm: float
    y_mm: float
    width_mm: float = CARD_WIDTH_MM
    height_mm: float = CARD_HEIGHT_MM

class Page(NamedTuple):
    index: int
    placements: List[Tuple[Image.Image, LayoutSlot]]
    width_mm: float = PAGE_WIDTH_MM
    height_mm: float = PAGE_HEIGHT_MM

def single_slot(page_index: int) -> LayoutSlot:
    """A card centred on its own page."""
    x = PAGE_WIDTH_MM / 2 - CARD_WIDTH_MM / 2
    y = PAGE_HEIGHT_MM / 2 - CARD_HEIGHT_MM / 2
    return LayoutSlot(page_index, x, y)

def grid_slot(index: int, cols: int = GRID_COLS, rows: int = GRID_ROWS, padding_mm: float = 0.0) -> LayoutSlot:
    """
    Slot for the index-th card of a cols x rows grid, filled row by row from
    the top of the page. The grid block is centred on the page.
    """
    cards_per_page = cols * rows
    col = index % cols
    row = (index // cols) % rows
    grid_width = CARD_WIDTH_MM * cols + (cols - 1) * padding_mm
    # NOTE: padding is counted twice in the vertical extent, unlike the width.
    grid_height = (CARD_HEIGHT_MM + padding_mm) * rows + (rows - 1) * padding_mm
    x_offset = (PAGE_WIDTH_MM - grid_width) / 2
    y_offset = (PAGE_HEIGHT_MM - grid_height) / 2
    x = x_offset + (CARD_WIDTH_MM + padding_mm) * col
    y = PAGE_HEIGHT_MM - y_offset - (CARD_HEIGHT_MM + padding_mm) * (row + 1)
    return LayoutSlot(index // cards_per_page, x, y)

def printable_images(results: Sequence[FetchResult]) -> List[Image.Image]:
    """Drops failed fetches, reporting each one."""
    images: List[Image.Image] = []
    for result in results:
        if result.ok:
            images.append(result.image)
        else:
            print(f"  Error getting image for {result.source.label}: {result.error}")
    return images

def layout_pages(
    results: Sequence[FetchResult],
    layout: str,
    cols: int = GRID_COLS,
    rows: int = GRID_ROWS,
    padding_mm: float = 0.0,
    debug: bool = False
) -> List[Page]:
    """Places every successfully fetched image on a page, in order."""
    if layout not in LAYOUT_CHOICES:
        raise ValueError(f"Invalid layout: '{layout}'. Supported: {', '.join(LAYOUT_CHOICES)}")
    if cols < 1 or rows < 1:
        raise ValueError(f"Grid must be at least 1x1, got {cols}x{rows}.")

    pages: List[Page] = []
    for i, image in enumerate(printable_images(results)):
        if layout == LAYOUT_SINGLE:
            slot = single_slot(i)
        else:
            slot = grid_slot(i, cols, rows, padding_mm)
        if slot.page_index == len(pages):
            pages.append(Page(index=slot.page_index, placements=[]))
        pages[slot.page_index].placements.append((image, slot))

    if debug:
        grid_str = f" ({cols}x{rows}, padding {padding_mm}mm)" if layout == LAYOUT_GRID else ""
        print(f"DEBUG: Layout '{layout}'{grid_str}: {sum(len(p.placements) for p in pages)} image(s) on {len(pages)} page(s)")
    return pages
