from __future__ import annotations
import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import id_in_range
from app.errors import Conflict, ValidationError
from app.models.answer import Answer

logger = logging.getLogger(__name__)


class AnswerStore:
    """Persistence for submitted answers, bound to one session"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, respondent_id: int, survey_id: int, value: str) -> Answer:
        if value is None or value == "":
            raise ValidationError("Please select an answer before submitting")

        answer = Answer(respondent_id=respondent_id, survey_id=survey_id, value=value)
        self.db.add(answer)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # Only uq_answers_respondent_survey means a duplicate; a foreign key
            # failure (survey deleted meanwhile) is not the caller's second answer
            if self.find_by_respondent_and_survey(respondent_id, survey_id):
                logger.warning(f"User {respondent_id} already answered survey {survey_id}")
                raise Conflict()
            logger.error(f"Failed to save answer to survey {survey_id}: {str(e)}")
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save answer to survey {survey_id}: {str(e)}")
            raise
        self.db.refresh(answer)
        return answer

    def find_by_respondent_and_survey(self, respondent_id: int, survey_id: int) -> List[Answer]:
        if not id_in_range(survey_id):
            return []
        return self.db.query(Answer).filter(
            Answer.respondent_id == respondent_id,
            Answer.survey_id == survey_id,
        ).all()

    def find_by_survey(self, survey_id: int) -> List[Answer]:
        if not id_in_range(survey_id):
            return []
        return self.db.query(Answer).filter(Answer.survey_id == survey_id).all()

    def list_all(self) -> List[Answer]:
        return self.db.query(Answer).order_by(Answer.answer_id).all()
