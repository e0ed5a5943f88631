"""
Application package initializer.

The service is split into small pieces: ``core`` holds settings,
logging and error handlers, ``schemas`` the pydantic request and
response models, ``services`` the payment ledger and ``api`` the
routers that expose it over HTTP.
"""

from .main import app  # noqa: F401
