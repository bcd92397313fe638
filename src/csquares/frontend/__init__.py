"""Frontend package for the C-squares map viewer."""

from .app import main
from .components import build_cell_map, display_cell_map, render_cell_details

__all__ = ["main", "build_cell_map", "display_cell_map", "render_cell_details"]
