"""Stories router for story management.

CRUD endpoints for reading passages. Creating or updating a story's content
runs morphological analysis and stores the extracted vocabulary alongside
the story.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field, field_validator
from sqlalchemy import func as sql_func
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from yomimono.api.deps import CurrentUser, DBSession, Vocabulary
from yomimono.api.exceptions import ForbiddenError, NotFoundError
from yomimono.models.story import Story
from yomimono.models.user import User

router = APIRouter()


# =============================================================================
# Schemas
# =============================================================================


def _require_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Title cannot be blank")
    return value


class StoryCreateRequest(BaseModel):
    """Request to create a new story."""

    title: str = Field(..., max_length=255)
    content: str = Field(default="", description="Japanese text of the story")

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        return _require_title(value)


class StoryUpdateRequest(BaseModel):
    """Partial story update. Omitted fields keep their current value."""

    title: str | None = Field(default=None, max_length=255)
    content: str | None = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _require_title(value)


class WordResponse(BaseModel):
    """Extracted word with its reading."""

    original: str
    reading: str


class StoryUserResponse(BaseModel):
    """Story owner as shown on stories."""

    id: int
    display_name: str

    class Config:
        from_attributes = True


class StoryResponse(BaseModel):
    """Story information response."""

    id: int
    title: str
    content: str
    word_count: int
    words: list[WordResponse]
    user: StoryUserResponse | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class StoryListResponse(BaseModel):
    """Paginated list of stories."""

    items: list[StoryResponse]
    total: int
    page: int
    page_size: int
    has_more: bool


# =============================================================================
# Helpers
# =============================================================================


async def _load_story(db: AsyncSession, story_id: int) -> Story:
    """Load a story with its owner, refreshing any cached instance."""
    result = await db.execute(
        select(Story)
        .options(selectinload(Story.user))
        .where(Story.id == story_id)
        .execution_options(populate_existing=True)
    )
    story = result.scalar_one_or_none()

    if not story:
        raise NotFoundError("Story", str(story_id))

    return story


def _check_owner(story: Story, user: User) -> None:
    if story.user_id != user.id:
        raise ForbiddenError()


# =============================================================================
# Endpoints
# =============================================================================


@router.post("", response_model=StoryResponse, status_code=status.HTTP_201_CREATED)
async def create_story(
    request: StoryCreateRequest,
    user: CurrentUser,
    db: DBSession,
    vocabulary: Vocabulary,
) -> Story:
    """Create a new story.

    The content is analyzed before anything is written, so a story whose
    content cannot be analyzed is never stored.

    Args:
        request: Story creation parameters
        user: Authenticated user
        db: Database session
        vocabulary: Word extraction service

    Returns:
        Created story with its word list
    """
    extraction = await vocabulary.analyze(request.content)

    story = Story(
        user_id=user.id,
        title=request.title,
        content=request.content,
    )
    story.apply_extraction(extraction)
    db.add(story)
    await db.commit()

    return await _load_story(db, story.id)


@router.get("", response_model=StoryListResponse)
async def list_stories(
    db: DBSession,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = 20,
) -> StoryListResponse:
    """List stories, newest first.

    Args:
        db: Database session
        page: Page number (1-indexed)
        page_size: Items per page

    Returns:
        Paginated list of stories
    """
    total_result = await db.execute(select(sql_func.count()).select_from(Story))
    total = total_result.scalar() or 0

    offset = (page - 1) * page_size
    result = await db.execute(
        select(Story)
        .options(selectinload(Story.user))
        .order_by(Story.created_at.desc(), Story.id.desc())
        .offset(offset)
        .limit(page_size)
    )
    stories = result.scalars().all()

    return StoryListResponse(
        items=[StoryResponse.model_validate(story) for story in stories],
        total=total,
        page=page,
        page_size=page_size,
        has_more=(offset + len(stories)) < total,
    )


@router.get("/{story_id}", response_model=StoryResponse)
async def get_story(
    story_id: int,
    db: DBSession,
) -> Story:
    """Get a specific story by ID.

    Raises:
        NotFoundError: If story doesn't exist
    """
    return await _load_story(db, story_id)


@router.put("/{story_id}", response_model=StoryResponse)
async def update_story(
    story_id: int,
    request: StoryUpdateRequest,
    user: CurrentUser,
    db: DBSession,
    vocabulary: Vocabulary,
) -> Story:
    """Update a story.

    When content is supplied the word list is recomputed from scratch.

    Args:
        story_id: Story database ID
        request: Fields to change
        user: Authenticated user
        db: Database session
        vocabulary: Word extraction service

    Returns:
        Updated story

    Raises:
        NotFoundError: If story doesn't exist
        ForbiddenError: If user doesn't own the story
    """
    story = await _load_story(db, story_id)
    _check_owner(story, user)

    if request.content is not None:
        extraction = await vocabulary.analyze(request.content)
        story.content = request.content
        story.apply_extraction(extraction)
    if request.title is not None:
        story.title = request.title

    await db.commit()

    return await _load_story(db, story_id)


@router.delete("/{story_id}", response_model=StoryResponse)
async def delete_story(
    story_id: int,
    user: CurrentUser,
    db: DBSession,
) -> StoryResponse:
    """Delete a story.

    Returns:
        The deleted story

    Raises:
        NotFoundError: If story doesn't exist
        ForbiddenError: If user doesn't own the story
    """
    story = await _load_story(db, story_id)
    _check_owner(story, user)

    deleted = StoryResponse.model_validate(story)
    await db.delete(story)
    await db.commit()

    return deleted
