"""
Application package.

``main`` assembles the FastAPI app.  Storage, configuration and logging
live in ``core``; request/response models in ``schemas``; business logic
in ``services``; HTTP routes in ``api``.
"""

from .main import app  # noqa: F401
