import pytest

from core.repositories import CommentRepository, IssueRepository


def test_update_unknown_column_raises(test_session):
    repo = IssueRepository(test_session)

    with pytest.raises(ValueError, match="Unknown column"):
        repo.update("any-id", typo_key=5)


def test_update_missing_record_affects_nothing(test_session):
    repo = IssueRepository(test_session)

    assert repo.update("missing", title="x") == 0


def test_update_without_fields_is_a_no_op(test_session):
    repo = IssueRepository(test_session)
    issue = repo.create(title="Bug A", project_id="P1")

    assert repo.update(issue.id) == 0
    assert repo.get_by_id(issue.id).title == "Bug A"


def test_update_and_delete_report_affected_rows(test_session):
    repo = IssueRepository(test_session)
    issue = repo.create(title="Bug A", project_id="P1")

    assert repo.update(issue.id, status="DONE") == 1
    assert repo.get_by_id(issue.id, refresh=True).status == "DONE"
    assert repo.delete(issue.id) == 1
    assert repo.delete(issue.id) == 0


def test_list_for_project(test_session):
    repo = IssueRepository(test_session)
    repo.create(title="One", project_id="P1")
    repo.create(title="Two", project_id="P2")

    assert [issue.title for issue in repo.list_for_project("P1")] == ["One"]


def test_comment_repository_links_to_issue(test_session):
    issue = IssueRepository(test_session).create(title="Bug A", project_id="P1")
    comments = CommentRepository(test_session)

    comment = comments.create(issue=issue, content="first")

    assert comment.issue_id == issue.id
    assert [c.content for c in comments.get_all()] == ["first"]
