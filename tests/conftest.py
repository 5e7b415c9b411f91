"""Shared fixtures."""

from datetime import datetime, timezone
from typing import Callable

import pytest

from schema_builder import Schema, build_user_schema


@pytest.fixture
def user_schema() -> Callable[..., Schema]:
    """Return the schema builder."""
    return build_user_schema


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed current instant: 1 June 2023, noon UTC."""
    return datetime(2023, 6, 1, 12, 0, tzinfo=timezone.utc)
