"""Tests for SQLAlchemy models and settings."""

import pytest
from sqlalchemy import select

from yomimono.core.config import Settings
from yomimono.models import Base, Story, User, get_engine, get_session
from yomimono.text import ExtractionResult, Word


class TestModelImports:
    """Test that all models import correctly."""

    def test_base_metadata_tables(self) -> None:
        """Test that all tables are registered in Base.metadata."""
        assert set(Base.metadata.tables.keys()) == {"users", "stories"}

    def test_user_model_attributes(self) -> None:
        """Test User model has expected attributes."""
        for name in (
            "id",
            "username",
            "email",
            "display_name",
            "hashed_password",
            "is_active",
            "created_at",
            "updated_at",
            "stories",
        ):
            assert hasattr(User, name)

    def test_story_model_attributes(self) -> None:
        """Test Story model has expected attributes."""
        for name in (
            "id",
            "user_id",
            "title",
            "content",
            "word_count",
            "words",
            "created_at",
            "updated_at",
            "user",
        ):
            assert hasattr(Story, name)


class TestRelationships:
    """Test model relationships are correctly defined."""

    def test_user_stories_relationship(self) -> None:
        rel = User.stories.property
        assert rel.mapper.class_ == Story
        assert rel.back_populates == "user"

    def test_story_user_relationship(self) -> None:
        rel = Story.user.property
        assert rel.mapper.class_ == User
        assert rel.back_populates == "stories"


class TestApplyExtraction:
    """Test attaching extraction results to a story."""

    def test_apply_extraction(self) -> None:
        story = Story(title="t", content="")
        result = ExtractionResult(words=(Word("猫", "ネコ"), Word("犬", "イヌ")), word_count=2)

        story.apply_extraction(result)

        assert story.word_count == 2
        assert story.words == [
            {"original": "猫", "reading": "ネコ"},
            {"original": "犬", "reading": "イヌ"},
        ]


class TestSettings:
    """Test settings helpers."""

    def test_async_database_url(self) -> None:
        settings = Settings(database_url="postgresql://u:p@db:5432/yomimono")
        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/yomimono"

    def test_jwt_secret_fallback(self) -> None:
        assert Settings(secret_key="a", jwt_secret_key="").effective_jwt_secret == "a"
        assert Settings(secret_key="a", jwt_secret_key="b").effective_jwt_secret == "b"


class TestDatabase:
    """Test engine setup and the session dependency."""

    async def test_get_engine_requires_init(self) -> None:
        with pytest.raises(RuntimeError):
            get_engine()

    async def test_sqlite_ignores_pool_options(self, database) -> None:
        assert get_engine().dialect.name == "sqlite"

    async def test_session_does_not_commit_for_handler(self, database) -> None:
        sessions = get_session()
        session = await anext(sessions)
        session.add(User(username="ghost", email="ghost@test.com", hashed_password="x"))
        await session.flush()
        await sessions.aclose()

        async for fresh in get_session():
            result = await fresh.execute(select(User))
            assert result.scalars().all() == []

    async def test_session_rolls_back_on_error(self, database) -> None:
        sessions = get_session()
        session = await anext(sessions)
        session.add(User(username="ghost", email="ghost@test.com", hashed_password="x"))
        await session.flush()

        with pytest.raises(ValueError):
            await sessions.athrow(ValueError("handler failed"))

        async for fresh in get_session():
            result = await fresh.execute(select(User))
            assert result.scalars().all() == []
