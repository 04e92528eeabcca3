"""
Endpoint modules.

Each module defines an ``APIRouter`` named ``router`` which is
included by ``charity_api.app.api.router``.
"""
