"""
Core services.

Services own the business operations and talk to the database through
repositories.
"""

from core.services.issue_service import IssueService, compute_update_scopes

__all__ = [
    "IssueService",
    "compute_update_scopes",
]
