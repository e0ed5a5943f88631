"""
API package containing the HTTP routes.

``router.py`` aggregates the domain routers defined in ``endpoints``
and ``deps.py`` provides the dependencies they share.
"""
