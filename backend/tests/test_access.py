import pytest
from types import SimpleNamespace
from app.errors import Conflict, Unauthorized
from app.services.access import ensure_not_answered, require_ownership


class FakeAnswers:
    def __init__(self, existing):
        self.existing = existing
        self.calls = []

    def find_by_respondent_and_survey(self, respondent_id, survey_id):
        self.calls.append((respondent_id, survey_id))
        return [a for a in self.existing if a == (respondent_id, survey_id)]


def test_owner_passes_ownership_check():
    survey = SimpleNamespace(survey_id=1, owner_id=7)
    require_ownership(7, survey)


def test_non_owner_is_unauthorized():
    survey = SimpleNamespace(survey_id=1, owner_id=7)
    with pytest.raises(Unauthorized) as exc_info:
        require_ownership(8, survey)
    assert exc_info.value.status_code == 401


def test_first_answer_is_allowed():
    answers = FakeAnswers(existing=[(2, 9)])
    ensure_not_answered(answers, 1, 9)
    assert answers.calls == [(1, 9)]


def test_second_answer_conflicts():
    answers = FakeAnswers(existing=[(1, 9)])
    with pytest.raises(Conflict) as exc_info:
        ensure_not_answered(answers, 1, 9)
    assert exc_info.value.status_code == 409
