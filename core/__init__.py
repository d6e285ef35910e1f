"""
Issue Tracker Core Library.

Database management, models, repositories, services, event publishing
and logging shared by the API.

Usage:
    # Database
    from core.db import db, get_db
    from core.models import Issue, Comment
    from core.repositories import IssueRepository

    # Config
    from core.config import get_settings, Settings

    # Logging
    from core.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"
