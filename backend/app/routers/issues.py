"""
Issue and comment endpoints.

Handlers stay thin: validation happens in the DTOs, everything else in
IssueService.
"""

from fastapi import APIRouter, Depends, Response, status

from core.schemas import CommentCreate, IssueCreate, IssueUpdate
from core.services import IssueService

from ..auth.dependencies import get_current_claims
from ..dependencies import get_issue_service
from ..schemas import CommentResponse, IssueResponse, IssueWithCommentsResponse

router = APIRouter(
    prefix="/issues",
    tags=["issues"],
    dependencies=[Depends(get_current_claims)],
)


# =============================================================================
# Issues
# =============================================================================


@router.post("", response_model=IssueResponse, status_code=status.HTTP_201_CREATED)
def create_issue(
    request: IssueCreate,
    service: IssueService = Depends(get_issue_service),
):
    """Create an issue and announce it."""
    return service.create(request)


@router.get("", response_model=list[IssueResponse])
def list_issues(service: IssueService = Depends(get_issue_service)):
    """List every issue."""
    return service.find_all()


@router.get("/project/{project_id}", response_model=list[IssueResponse])
def list_project_issues(
    project_id: str,
    service: IssueService = Depends(get_issue_service),
):
    """List the issues of one project."""
    return service.find_all_for_project(project_id)


# Declared before /{issue_id} so "comments" is not taken for an issue id
@router.get("/comments", response_model=list[CommentResponse])
def list_all_comments(service: IssueService = Depends(get_issue_service)):
    """List comments across all issues."""
    return service.find_all_comments()


@router.get("/{issue_id}", response_model=IssueResponse)
def get_issue(
    issue_id: str,
    service: IssueService = Depends(get_issue_service),
):
    return service.find_one(issue_id)


@router.patch("/{issue_id}", response_model=IssueResponse)
def update_issue(
    issue_id: str,
    request: IssueUpdate,
    service: IssueService = Depends(get_issue_service),
):
    """Apply a partial update."""
    return service.update(issue_id, request)


@router.delete("/{issue_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_issue(
    issue_id: str,
    service: IssueService = Depends(get_issue_service),
):
    service.remove(issue_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Comments
# =============================================================================


@router.post(
    "/{issue_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    issue_id: str,
    request: CommentCreate,
    service: IssueService = Depends(get_issue_service),
):
    """Comment on an issue."""
    return service.add_comment(issue_id, request)


@router.get("/{issue_id}/comments", response_model=IssueWithCommentsResponse)
def list_issue_comments(
    issue_id: str,
    service: IssueService = Depends(get_issue_service),
):
    """Return the issue together with its comments."""
    return service.find_all_comments_for_issue(issue_id)
