"""Hyperlinked Year/Month/Day planner PDFs for the reMarkable tablet."""

from .builder import PlannerBuilder
from .calendar_math import CalendarProvider
from .config import PlannerConfig
from .errors import BuildOrderError, LayoutOverflow, PlannerError
from .grid import GridLabel, GridLayout, Region, create_grid, plan_cells
from .nodes import BuildState, Geometry, PageArena, PageKind, PageNode
from .surface import PdfSurface, PlannerDocument
from .thumbnails import ThumbnailDispatcher
from .tree import build_children, create_root

__version__ = "0.1.0"

__all__ = [
    "BuildOrderError",
    "BuildState",
    "CalendarProvider",
    "Geometry",
    "GridLabel",
    "GridLayout",
    "LayoutOverflow",
    "PageArena",
    "PageKind",
    "PageNode",
    "PdfSurface",
    "PlannerBuilder",
    "PlannerConfig",
    "PlannerDocument",
    "PlannerError",
    "Region",
    "ThumbnailDispatcher",
    "build_children",
    "create_grid",
    "create_root",
    "plan_cells",
]
