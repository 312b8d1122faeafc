"""
Application package initializer.

The application is split into small pieces: ``core`` holds
configuration, logging, errors and timestamp helpers, ``services``
holds the in-memory message store, ``schemas`` the wire models and
``api`` the HTTP routes.  ``main`` wires them together.
"""

from .main import app  # noqa: F401
