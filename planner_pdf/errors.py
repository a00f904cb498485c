"""Exceptions raised while assembling the planner."""


class PlannerError(Exception):
    """Base class for planner generation errors."""


class LayoutOverflow(PlannerError):
    """Too many items for the requested grid."""

    def __init__(self, rows: int, cols: int, skip: int, count: int):
        self.rows = rows
        self.cols = cols
        self.skip = skip
        self.count = count
        super().__init__(
            f"Too many objects to fit in given grid: rows={rows}, cols={cols}, "
            f"skip={skip}, objects={count}"
        )


class BuildOrderError(PlannerError):
    """A node was driven through its lifecycle out of order.

    Raised when a link targets a page that has no surface yet, or when a
    node skips or repeats a build state.
    """
