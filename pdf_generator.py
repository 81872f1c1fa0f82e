"""
PDF generation for MtgDeck2Pdf.
"""

from typing import List, NamedTuple, Sequence

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from card_processing import FetchResult
from config import DEFAULT_DOCUMENT_TITLE, GRID_COLS, GRID_ROWS, PAGE_HEIGHT_MM, PAGE_WIDTH_MM
from errors import EmptyDocumentError
from page_layout import Page, layout_pages

class Document(NamedTuple):
    title: str
    pages: List[Page]

def draw_page(c: canvas.Canvas, page: Page):
    c.setPageSize((page.width_mm * mm, page.height_mm * mm))
    for image, slot in page.placements:
        c.drawImage(ImageReader(image), slot.x_mm * mm, slot.y_mm * mm, width=slot.width_mm * mm, height=slot.height_mm * mm)
    c.showPage()

def write_document(document: Document, output_path: str, debug: bool = False) -> str:
    """
    Writes every page of the document to output_path and returns the path.
    Raises EmptyDocumentError (before touching the file system) if there are
    no pages, and OSError if the file cannot be written.
    """
    if not document.pages:
        raise EmptyDocumentError("No images to print. The PDF would be empty.")

    print(f"\n--- PDF Generation ({output_path}) ---")
    c = canvas.Canvas(output_path, pagesize=(PAGE_WIDTH_MM * mm, PAGE_HEIGHT_MM * mm))
    c.setTitle(document.title)
    c.setCreator("MtgDeck2Pdf")
    for page in document.pages:
        if debug: print(f"DEBUG: Drawing page {page.index + 1} with {len(page.placements)} image(s)")
        draw_page(c, page)
    c.save()
    print(f"PDF generation complete: {output_path} ({len(document.pages)} page(s))")
    return output_path

def create_pdf(
    results: Sequence[FetchResult],
    output_path: str,
    layout: str,
    padding_mm: float = 0.0,
    title: str = DEFAULT_DOCUMENT_TITLE,
    cols: int = GRID_COLS,
    rows: int = GRID_ROWS,
    debug: bool = False
) -> str:
    """Lays out the fetched images and writes them to output_path."""
    pages = layout_pages(results, layout, cols=cols, rows=rows, padding_mm=padding_mm, debug=debug)
    return write_document(Document(title=title, pages=pages), output_path, debug=debug)
