"""HTML rendering."""

from psapi.render.render import RenderError, catalog_context, render_catalog

__all__ = ["RenderError", "catalog_context", "render_catalog"]
