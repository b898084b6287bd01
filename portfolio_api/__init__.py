"""
Top‑level package for the Portfolio API.

This file makes ``portfolio_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``portfolio_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
