import pytest

from brandsite.app.config import Settings
from brandsite.app.models import RawExtractionInput


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def acme_input():
    return RawExtractionInput(
        business_name="Acme Plumbing",
        category="plumber",
        location="Richmond",
        preferred_colors=["#1e3a5f", "#f59e0b"],
    )
