"""
Tests for the ProblemService.
"""

import pytest
from pydantic import ValidationError

from codearena.errors import NotFound, Unauthorized
from codearena.models.problem import Problem
from codearena.schemas.problem import ProblemCreate, ProblemUpdate
from codearena.services.problem_service import ProblemService


def problem_data(title="Reverse a String"):
    return ProblemCreate(
        title=title,
        description="Reverse the input.",
        example="abc -> cba",
        input="abc",
        expected_output="cba",
    )


class TestCreateProblem:
    def test_admin_creates(self, db_session, admin):
        problem = ProblemService(db_session).create_problem(admin.email, problem_data())

        assert problem.id is not None
        assert problem.expected_output == "cba"
        assert problem.created_at is not None

    @pytest.mark.parametrize("role_fixture", ["developer", "recruiter"])
    def test_non_admin_rejected(self, request, db_session, role_fixture):
        user = request.getfixturevalue(role_fixture)

        with pytest.raises(Unauthorized):
            ProblemService(db_session).create_problem(user.email, problem_data())

        assert db_session.query(Problem).count() == 0


class TestReadProblems:
    def test_get_problem(self, db_session, problem):
        assert ProblemService(db_session).get_problem(problem.id).title == problem.title

    def test_missing_problem(self, db_session):
        with pytest.raises(NotFound) as exc_info:
            ProblemService(db_session).get_problem(42)

        assert exc_info.value.message == "problem does not exist"

    def test_list_pages(self, db_session, admin):
        service = ProblemService(db_session)
        for i in range(5):
            service.create_problem(admin.email, problem_data(f"Problem {i}"))

        page = service.list_problems(page=2, page_size=2)

        assert [p.title for p in page["problems"]] == ["Problem 2", "Problem 3"]
        assert page["pagination"].total_items == 5
        assert page["pagination"].total_pages == 3
        assert page["pagination"].items_per_page == 2

    def test_list_empty(self, db_session):
        page = ProblemService(db_session).list_problems(page=1, page_size=10)

        assert page["problems"] == []
        assert page["pagination"].total_pages == 0


class TestUpdateProblem:
    def test_only_given_fields_change(self, db_session, admin, problem):
        updated = ProblemService(db_session).update_problem(
            admin.email, problem.id, ProblemUpdate(title="Add Two Numbers")
        )

        assert updated.title == "Add Two Numbers"
        assert updated.expected_output == "5"

    def test_developer_rejected(self, db_session, developer, problem):
        with pytest.raises(Unauthorized):
            ProblemService(db_session).update_problem(
                developer.email, problem.id, ProblemUpdate(title="Hacked")
            )

        db_session.refresh(problem)
        assert problem.title == "Sum of Two Numbers"

    def test_missing_problem(self, db_session, admin):
        with pytest.raises(NotFound):
            ProblemService(db_session).update_problem(admin.email, 999, ProblemUpdate(title="X"))

    @pytest.mark.parametrize("field", ["title", "description", "expected_output"])
    def test_required_fields_cannot_be_cleared(self, field):
        with pytest.raises(ValidationError):
            ProblemUpdate(**{field: None})

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            ProblemUpdate(title="")

    def test_optional_fields_can_be_cleared(self, db_session, admin, problem):
        updated = ProblemService(db_session).update_problem(
            admin.email, problem.id, ProblemUpdate(example=None)
        )

        assert updated.example is None
        assert updated.expected_output == "5"
