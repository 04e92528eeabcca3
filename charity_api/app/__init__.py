"""
Application package initializer.

The API is organised into ``core`` (configuration, logging and the two
persistence backends), ``schemas``, ``services`` and ``api`` (routers).
"""

from .main import app  # noqa: F401
