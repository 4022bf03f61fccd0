"""
Application package initializer.

The application is split into a few small layers: ``core`` holds
configuration, logging, errors and the record store, ``services``
the user operations, ``schemas`` the pydantic models and ``api`` the
JSON and HTML routes.  Static HTML documents live in ``views`` and
client scripts and styles in ``static``.
"""

from .main import app  # noqa: F401
