"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource (articles, journalists, categories) exposes
a router defined in ``api/v1/endpoints``; the data itself lives in the
in‑memory store assembled in ``core/store.py``.
"""

from .main import app  # noqa: F401
