import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def clear_cache():
    # cached routes survive the per-test database rollback
    cache.clear()
    yield
    cache.clear()
