"""
Top‑level package for the Bank API.

The package itself provides no public exports; the application lives
in the ``app`` subpackage and can be served with::

    uvicorn bank_api.app.main:app --port 9090
"""

__all__ = []
