"""
Exchange names, routing keys and payload shapes of the events published on
every issue mutation.

Downstream consumers bind on these exact strings.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from kombu import Exchange

from core.enums import UpdateScope

# Service-to-service notifications
DIRECT_EXCHANGE = "direct-exchange"
ISSUE_CREATED = "project.issue.created"
ISSUE_DELETED = "project.issue.deleted"

# Activity feed
NEWS_EXCHANGE = "news"
NEWS_ISSUE_CREATE = "news.issue.create"
NEWS_ISSUE_UPDATE = "news.issue.update"
NEWS_ISSUE_DELETE = "news.issue.delete"

EXCHANGES: dict[str, Exchange] = {
    DIRECT_EXCHANGE: Exchange(DIRECT_EXCHANGE, type="direct", durable=True),
    NEWS_EXCHANGE: Exchange(NEWS_EXCHANGE, type="topic", durable=True),
}


def issue_reference(issue_id: str) -> dict[str, Any]:
    return {"uuid": issue_id}


def issue_created(issue_input: Mapping[str, Any], issue_id: str) -> dict[str, Any]:
    return {**issue_input, "issueId": issue_id}


def issue_updated(
    fields: Mapping[str, Any],
    project_id: str,
    issue_id: str,
    scopes: Iterable[UpdateScope],
) -> dict[str, Any]:
    return {
        **fields,
        "projectId": project_id,
        "issueId": issue_id,
        "updateScopes": [scope.value for scope in scopes],
    }


def issue_deleted(
    title: str, description: str | None, project_id: str, issue_id: str
) -> dict[str, Any]:
    return {
        "title": title,
        "description": description,
        "projectId": project_id,
        "issueId": issue_id,
    }


def comment_added(
    comment_input: Mapping[str, Any], issue_id: str, project_id: str
) -> dict[str, Any]:
    # Comment fields are spread last and win on key clashes
    return {
        "issueId": issue_id,
        "projectId": project_id,
        "updateScopes": [UpdateScope.COMMENT.value],
        **comment_input,
    }
