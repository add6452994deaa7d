"""Views that render data into the document."""

from .detail_view import render_detail_overlay
from .grid_view import render_grid
from .hydrator import hydrate_types

__all__ = ["render_grid", "render_detail_overlay", "hydrate_types"]
