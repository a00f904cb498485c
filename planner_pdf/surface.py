"""PyMuPDF drawing surface and document container.

All coordinates are in layout space: origin at the top-left corner of the
page, y growing downwards. Text is placed by its baseline.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import fitz

from .config import FILL_BLACK, FONT_NAME

logger = logging.getLogger(__name__)

RectTuple = Tuple[float, float, float, float]


def gray(level: float) -> Tuple[float, float, float]:
    return (level, level, level)


class PdfSurface:
    """One page of the planner document.

    Adding a page to a ``fitz.Document`` orphans every ``fitz.Page`` loaded
    before it, so a surface keeps its page number and reloads its page once
    per document generation.
    """

    def __init__(self, document: "PlannerDocument", number: int,
                 page: Optional[fitz.Page] = None):
        self.document = document
        self.number = number
        self._page = page
        self._generation = document.generation if page is not None else -1

    @property
    def page(self) -> fitz.Page:
        if self._page is None or self._generation != self.document.generation:
            self._page = self.document.doc[self.number]
            self._generation = self.document.generation
        return self._page

    @property
    def width(self) -> float:
        return self.page.rect.width

    @property
    def height(self) -> float:
        return self.page.rect.height

    # -------------------------------------------------------------------------
    # Basic Drawing Functions
    # -------------------------------------------------------------------------

    def draw_line(self, x0: float, y0: float, x1: float, y1: float,
                  width: float = 1, level: float = FILL_BLACK):
        self.page.draw_line(fitz.Point(x0, y0), fitz.Point(x1, y1),
                            color=gray(level), width=width)

    def fill_rect(self, rect: RectTuple, level: float):
        self.page.draw_rect(fitz.Rect(rect), color=None, fill=gray(level), width=0)

    def place_text(self, text: str, x: float, y: float, font_size: float):
        """Insert ``text`` with its baseline starting at (x, y)."""
        self.page.insert_text(fitz.Point(x, y), text,
                              fontsize=font_size, fontname=FONT_NAME, color=gray(FILL_BLACK))

    def text_width(self, text: str, font_size: float) -> float:
        return fitz.get_text_length(text, fontname=FONT_NAME, fontsize=font_size)

    def add_link(self, rect: RectTuple, target: "PdfSurface"):
        """Make ``rect`` a clickable region that jumps to ``target``."""
        self.page.insert_link({
            "kind": fitz.LINK_GOTO,
            "page": target.number,
            "from": fitz.Rect(rect),
        })

    # -------------------------------------------------------------------------
    # Area fills (vector, batched through a Shape)
    # -------------------------------------------------------------------------

    def fill_dots(self, x0: float, y0: float, x1: float, y1: float,
                  spacing: float, dot_size: float = 2):
        shape = self.page.new_shape()
        y = y0
        while y < y1:
            x = x0
            while x < x1:
                shape.draw_rect(fitz.Rect(x, y, x + dot_size, y + dot_size))
                x += spacing
            y += spacing
        shape.finish(color=gray(FILL_BLACK), fill=gray(FILL_BLACK))
        shape.commit()

    def fill_lines(self, x0: float, y0: float, x1: float, y1: float,
                   gap: float, level: float = 0.5, width: float = 0.5):
        shape = self.page.new_shape()
        y = y0
        while y < y1:
            shape.draw_line(fitz.Point(x0, y), fitz.Point(x1, y))
            y += gap
        shape.finish(color=gray(level), width=width)
        shape.commit()


class PlannerDocument:
    """Owns the PDF document that every surface belongs to."""

    def __init__(self):
        self.doc = fitz.open()
        # bumped whenever a page is added
        self.generation = 0

    def __len__(self) -> int:
        return len(self.doc)

    def new_surface(self, width: float, height: float) -> PdfSurface:
        number = len(self.doc)
        page = self.doc.new_page(width=width, height=height)
        self.generation += 1
        return PdfSurface(self, number, page)

    def links(self) -> Sequence[Tuple[int, int]]:
        """(source page, target page) for every internal link."""
        pairs = []
        for page in self.doc:
            for link in page.get_links():
                if link.get("kind") == fitz.LINK_GOTO:
                    pairs.append((page.number, link["page"]))
        return pairs

    def save(self, output_path: Union[str, Path]):
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.doc.save(str(output_path), garbage=3, deflate=True)
        logger.info("Saved %d pages to %s", len(self.doc), output_path)

    def close(self):
        self.doc.close()
