import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def _clear_cache():
    # throttling counters and reference lists live in the cache
    cache.clear()
    yield
    cache.clear()
