"""Comment repository."""

from core.models import Comment

from .base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment operations."""

    model = Comment
