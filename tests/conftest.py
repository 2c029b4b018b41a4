"""Shared fixtures for the test suite."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from yomimono.api.main import app
from yomimono.models.database import close_db, create_all, init_db
from yomimono.services.vocabulary import VocabularyService, get_vocabulary_service
from yomimono.text import RawToken


class FakeTokenizer:
    """Whitespace tokenizer reading "surface:reading" pairs.

    "猫:ネコ は" yields RawToken("猫", "ネコ") then RawToken("は", "").
    """

    def __init__(self) -> None:
        self.calls: list[str] = []

    def tokenize(self, text: str) -> list[RawToken]:
        self.calls.append(text)
        tokens = []
        for piece in text.split():
            surface, _, reading = piece.partition(":")
            tokens.append(RawToken(surface=surface, reading=reading))
        return tokens


def make_tokens(*pairs: tuple[str, str | None]) -> list[RawToken]:
    return [RawToken(surface=s, reading=r) for s, r in pairs]


@pytest.fixture
def fake_tokenizer() -> FakeTokenizer:
    return FakeTokenizer()


@pytest.fixture
def vocabulary(fake_tokenizer: FakeTokenizer) -> VocabularyService:
    return VocabularyService(tokenizer=fake_tokenizer, timeout_seconds=5)


@pytest.fixture
async def database() -> AsyncGenerator[None, None]:
    """In-memory SQLite database shared by every session of one test."""
    init_db("sqlite+aiosqlite://", pool_size=5, max_overflow=10)
    await create_all()
    yield
    await close_db()


@pytest.fixture
async def client(database: None, vocabulary: VocabularyService) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_vocabulary_service] = lambda: vocabulary

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


async def register(client: AsyncClient, username: str = "username", **extra) -> dict[str, str]:
    """Register a user and return bearer auth headers."""
    payload = {
        "username": username,
        "email": f"{username}@test.com",
        "password": "password",
        "display_name": "Full Name",
        **extra,
    }
    response = await client.post("/api/auth/register", json=payload)
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
