"""Miniature renderings of a page inside a grid cell of its parent.

Only months have a thumbnail (weekday initials over a small day grid);
every other kind draws nothing.
"""

import logging
from typing import Callable, Dict, List, Optional

from .calendar_math import CalendarProvider
from .config import FONT_SIZES, THUMBNAIL_LABEL_HEIGHT, THUMBNAIL_PADDING
from .errors import LayoutOverflow
from .grid import Region
from .nodes import PageArena, PageKind, PageNode
from .sections import days_grid, weekday_header
from .tree import child_kind_of

logger = logging.getLogger(__name__)


class ThumbnailDispatcher:
    """Draws a node's thumbnail according to its kind.

    Instances are passed to ``create_grid`` as its ``render_thumbnail``.
    A thumbnail that does not fit is skipped and, when ``overflows`` is
    given, recorded there.
    """

    def __init__(self, arena: PageArena, calendar: CalendarProvider,
                 first_day_of_week: int, page_height: float,
                 overflows: Optional[List[LayoutOverflow]] = None):
        self.arena = arena
        self.calendar = calendar
        self.first_day_of_week = first_day_of_week
        self.page_height = page_height
        self.overflows = overflows
        self._renderers: Dict[PageKind, Optional[Callable]] = {
            PageKind.MAIN: None,
            PageKind.YEAR: None,
            PageKind.MONTH: self._month_thumbnail,
            PageKind.WEEK: None,
            PageKind.DAY: None,
        }

    def __call__(self, surface, region: Region, node: PageNode):
        self.render(surface, region, node, node.kind, child_kind_of(node.kind))

    def render(self, surface, region: Region, node: PageNode,
               kind: PageKind, child_kind: Optional[PageKind]):
        renderer = self._renderers[kind]
        if renderer is None:
            return
        try:
            renderer(surface, region, node, child_kind)
        except LayoutOverflow as exc:
            logger.warning("Skipping thumbnail of %r: %s", node, exc)
            if self.overflows is not None:
                self.overflows.append(exc)

    def _month_thumbnail(self, surface, region: Region, node: PageNode,
                         child_kind: PageKind):
        font_size = FONT_SIZES["thumbnail"]
        header_top = region.y0 + THUMBNAIL_LABEL_HEIGHT
        header_bottom = header_top + THUMBNAIL_LABEL_HEIGHT
        weekday_header(surface, Region(region.x0, header_top, region.x1, header_bottom),
                       self.calendar, self.first_day_of_week, THUMBNAIL_PADDING,
                       font_size, self.page_height, first_letter_only=True)

        days = [child for child in self.arena.children_of(node) if child.kind is child_kind]
        days_grid(surface, Region(region.x0, header_bottom, region.x1, region.y1),
                  node, days, self.calendar, self.first_day_of_week,
                  THUMBNAIL_PADDING, font_size, self.page_height)
