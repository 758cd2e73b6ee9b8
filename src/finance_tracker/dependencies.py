"""Shared request dependencies."""

from datetime import datetime
from typing import Annotated

from fastapi import Depends

from .core import utcnow


def get_clock() -> datetime:
    """Current time for the request.

    Handlers take "now" from here rather than reading the system clock, so
    tests can pin it with ``app.dependency_overrides[get_clock]``.
    """
    return utcnow()


Now = Annotated[datetime, Depends(get_clock)]
