"""Guards run by the API layer before mutating surveys or answers."""
import logging

from app.errors import Conflict, Unauthorized

logger = logging.getLogger(__name__)


def require_ownership(actor_id: int, survey) -> None:
    """Raise Unauthorized unless ``actor_id`` owns ``survey``"""
    if actor_id != survey.owner_id:
        logger.warning(f"User {actor_id} tried to modify survey {survey.survey_id} owned by {survey.owner_id}")
        raise Unauthorized()


def ensure_not_answered(answers, actor_id: int, survey_id: int) -> None:
    """
    Raise Conflict if ``actor_id`` already answered ``survey_id``.

    ``answers`` is an AnswerStore. This is a read-then-write check; the
    unique constraint on the answers table is what actually rejects a
    concurrent duplicate.
    """
    if answers.find_by_respondent_and_survey(actor_id, survey_id):
        logger.info(f"Rejected duplicate answer from user {actor_id} on survey {survey_id}")
        raise Conflict()
