"""Cell grid and diff engine."""

from weft.tui.buffer.buffer import Buffer, StyledContentListener
from weft.tui.buffer.cell import Cell, CellUpdate

__all__ = ["Buffer", "Cell", "CellUpdate", "StyledContentListener"]
