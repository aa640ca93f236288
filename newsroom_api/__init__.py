"""
Top‑level package for the Newsroom API.

This file makes ``newsroom_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``newsroom_api.app.main``.  The HTTP client lives in
``newsroom_api.client``; everything else lives in submodules under
``app``.
"""

__all__ = []
