import itertools

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.engine.criteria import word_count
from app.main import app

# Neutral words that trigger no rubric theme.
FILLER_WORDS = ["the", "garden", "was", "green", "and", "quiet", "today"]

STRONG_CORE = (
    "1) Key failures: the council used cameras without consent or transparency, "
    "and did not test for bias. "
    "2) Residents faced harm and lost trust, and fairness suffered. "
    "3) One action: the council should run a DPIA first."
)


def pad_to(text: str, words: int) -> str:
    """Append filler words until the text has exactly `words` words."""
    missing = words - word_count(text)
    if missing <= 0:
        return text
    filler = " ".join(itertools.islice(itertools.cycle(FILLER_WORDS), missing))
    return f"{text} {filler}".strip()


@pytest.fixture
def pad():
    return pad_to


@pytest.fixture
def strong_answer():
    return pad_to(STRONG_CORE, 60)


@pytest.fixture
def plain_answer():
    return pad_to("", 60)


@pytest.fixture
def client():
    # https base URL so the Secure session cookie is sent back
    with TestClient(app, base_url="https://testserver") as test_client:
        yield test_client


@pytest.fixture
def unlocked_client(client):
    response = client.post("/api/unlock", json={"code": settings.ACCESS_CODE})
    assert response.status_code == 200
    return client
