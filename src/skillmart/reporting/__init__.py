"""Human-readable rendering of catalogs and install outcomes."""

from .listing import render_catalog, render_install_outcome

__all__ = ["render_catalog", "render_install_outcome"]
