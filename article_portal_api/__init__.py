"""
Top‑level package for the Article Portal API.

The HTTP application lives in the ``app`` subpackage and can be
imported with fully qualified names such as
``article_portal_api.app.main``.  A small ``requests`` based client
for the same API is provided in :mod:`article_portal_api.client`.
"""

__all__ = []
