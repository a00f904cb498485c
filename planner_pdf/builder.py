"""Two-pass planner build.

Pass one (``materialize``) walks the tree depth first in date order: every
node gets its page and title, then builds and materializes its children.
Pass two (``annotate``) adds everything that links sideways or downwards:
the "<" / ">" sibling arrows and the child grids. A sibling may live under
another parent, so arrows are only safe once the whole tree has pages.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .calendar_math import CalendarProvider
from .config import (DOT_SPACING, FONT_SIZES, GRID_PADDING,
                     NOTES_FRACTION_DEFAULT, YEAR_GRID, PlannerConfig)
from .errors import BuildOrderError, LayoutOverflow
from .grid import GridLayout, Region, create_grid
from .nodes import BuildState, Geometry, PageArena, PageKind, PageNode
from .pages import (draw_dot_area, draw_margin, draw_navigation,
                    draw_notes_section, draw_section_header, draw_title,
                    title_height)
from .sections import days_grid, weekday_header
from .surface import PlannerDocument
from .thumbnails import ThumbnailDispatcher
from .tree import build_children, create_root

logger = logging.getLogger(__name__)


class PlannerBuilder:

    def __init__(self, config: Optional[PlannerConfig] = None,
                 calendar: Optional[CalendarProvider] = None,
                 document: Optional[PlannerDocument] = None):
        self.config = (config or PlannerConfig()).validated()
        self.calendar = calendar or CalendarProvider()
        self.document = document if document is not None else PlannerDocument()
        self.arena = PageArena()
        self.root: Optional[PageNode] = None
        self.overflows: List[LayoutOverflow] = []
        self.thumbnails = ThumbnailDispatcher(self.arena, self.calendar,
                                              self.config.first_day_of_week,
                                              self.config.page_height,
                                              overflows=self.overflows)
        self._content: Dict[PageKind, Callable[[PageNode], None]] = {
            PageKind.MAIN: self.create_years_section,
            PageKind.YEAR: self.create_months_section,
            PageKind.MONTH: self.create_days_section,
            PageKind.WEEK: lambda node: None,
            PageKind.DAY: self.create_tasks_section,
        }

    def root_geometry(self) -> Geometry:
        return Geometry(page_width=self.config.page_width,
                        page_height=self.config.page_height,
                        margin_width=self.config.margin,
                        notes_fraction=NOTES_FRACTION_DEFAULT,
                        left_handed=self.config.left_handed,
                        portrait=self.config.portrait)

    # -------------------------------------------------------------------------
    # Links
    # -------------------------------------------------------------------------

    def target(self, node: Optional[PageNode]):
        """Surface of ``node`` for use as a link target (None passes through)."""
        return None if node is None else node.target_surface()

    def place_grid(self, surface, region: Region, rows: int, cols: int, items,
                   **kwargs) -> Optional[GridLayout]:
        """``create_grid`` that reports an overflow instead of raising it."""
        try:
            return create_grid(surface, region, rows, cols, items, **kwargs)
        except LayoutOverflow as exc:
            logger.warning("Layout overflow: %s", exc)
            self.overflows.append(exc)
            return None

    # -------------------------------------------------------------------------
    # Pass one: pages, titles, children
    # -------------------------------------------------------------------------

    def create_page(self, node: PageNode):
        geometry = node.geometry
        surface = self.document.new_surface(geometry.page_width, geometry.page_height)
        self.arena.attach_surface(node, surface)
        draw_margin(surface, geometry)
        draw_title(surface, geometry, node.full_title,
                   self.target(self.arena.parent_of(node)))

    def materialize(self, node: PageNode):
        self.create_page(node)
        children = build_children(self.arena, node, self.calendar)
        if node.kind is PageKind.YEAR:
            logger.info("  [%d] %s", node.surface.number + 1, node.full_title)
        for child in children:
            self.materialize(child)
        self.arena.advance(node, BuildState.CHILDREN_BUILT)

    # -------------------------------------------------------------------------
    # Pass two: navigation, notes, child grids
    # -------------------------------------------------------------------------

    def create_navigation(self, node: PageNode):
        draw_navigation(node.surface, node.geometry, node.full_title,
                        self.target(self.arena.left_of(node)),
                        self.target(self.arena.right_of(node)))

    def annotate(self, node: PageNode):
        if node.state is not BuildState.CHILDREN_BUILT:
            raise BuildOrderError(f"{node!r} annotated while {node.state.name}")
        self.create_navigation(node)
        if not (node.kind is PageKind.MONTH and node.geometry.portrait):
            draw_notes_section(node.surface, node.geometry)
        self._content[node.kind](node)
        self.arena.advance(node, BuildState.ANNOTATED)
        for child in self.arena.children_of(node):
            self.annotate(child)

    def create_years_section(self, node: PageNode):
        surface, geometry = node.surface, node.geometry
        top = draw_section_header(surface, geometry, "Years")
        x_start, x_stop = geometry.content_span()
        years = self.arena.children_of(node)
        if not years:
            return
        self.place_grid(surface, Region(x_start + 20, top, x_stop - 20, geometry.page_height),
                        len(years), 1, years,
                        create_links=True, padding=GRID_PADDING,
                        page_height=geometry.page_height, label_in_middle=True)

    def create_months_section(self, node: PageNode):
        surface, geometry = node.surface, node.geometry
        x_start, x_stop = geometry.content_span()
        rows, cols = YEAR_GRID
        self.place_grid(surface,
                        Region(x_start + 15, title_height() + 5, x_stop - 15,
                               geometry.page_height - 45),
                        rows, cols, self.arena.children_of(node),
                        create_links=True, render_thumbnail=self.thumbnails,
                        padding=GRID_PADDING, page_height=geometry.page_height)

    def create_days_section(self, node: PageNode):
        surface, geometry = node.surface, node.geometry
        x_start, x_stop = geometry.content_span()
        header_top = title_height()
        header_bottom = header_top + FONT_SIZES["notes_title"] * 2
        try:
            weekday_header(surface, Region(x_start + 30, header_top, x_stop - 30, header_bottom),
                           self.calendar, self.config.first_day_of_week, GRID_PADDING,
                           FONT_SIZES["grid"], geometry.page_height)
            days_grid(surface,
                      Region(x_start + 30, header_bottom, x_stop - 30, geometry.page_height - 105),
                      node, self.arena.children_of(node), self.calendar,
                      self.config.first_day_of_week, GRID_PADDING, FONT_SIZES["grid"],
                      geometry.page_height)
        except LayoutOverflow as exc:
            logger.warning("Layout overflow: %s", exc)
            self.overflows.append(exc)

    def create_tasks_section(self, node: PageNode):
        top = draw_section_header(node.surface, node.geometry, "Tasks")
        draw_dot_area(node.surface, node.geometry,
                      top + FONT_SIZES["notes_title"], DOT_SPACING)

    # -------------------------------------------------------------------------
    # Main Generation
    # -------------------------------------------------------------------------

    def generate(self) -> PlannerDocument:
        """Build every page and link of the planner."""
        if self.root is not None:
            raise RuntimeError("Planner already generated")
        config = self.config
        logger.info("Generating planner %d-%d (%d years)...", config.start_year,
                    config.start_year + config.num_years - 1, config.num_years)

        self.root = create_root(self.arena, config.start_year, config.num_years,
                                self.root_geometry())
        self.materialize(self.root)
        logger.info("  Applying navigation and grids...")
        self.annotate(self.root)

        counts = self.arena.counts_by_kind()
        logger.info("Generated %d pages (%s)", len(self.document),
                    ", ".join(f"{kind.value}: {count}" for kind, count in counts.items() if count))
        return self.document

    def save(self, output_path: Union[str, Path, None] = None):
        self.document.save(output_path or self.config.filename)
        self.document.close()

