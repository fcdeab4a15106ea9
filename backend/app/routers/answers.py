from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Optional
import logging
from app.database import get_db
from app.models.user import User
from app.auth.token import get_current_user
from app.errors import Conflict
from app.schemas.answer import AnswerCreate, AnswerResponse, AnswerEnvelope, AnswerList
from app.services.survey_store import SurveyStore
from app.services.answer_store import AnswerStore
from app.services.access import ensure_not_answered
from app.monitoring import ANSWER_COUNT, DUPLICATE_ANSWER_COUNT

router = APIRouter(prefix="/answers", tags=["answers"])
logger = logging.getLogger(__name__)

@router.get("", response_model=AnswerList)
async def list_answers(
    survey: Optional[int] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get all answers, optionally only those for one survey"""
    answers = AnswerStore(db)
    rows = answers.list_all() if survey is None else answers.find_by_survey(survey)
    return {"answers": [AnswerResponse.from_model(a) for a in rows]}

@router.post("", response_model=AnswerEnvelope, status_code=status.HTTP_201_CREATED)
async def create_answer(
    answer: AnswerCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Submit the current user's answer to a survey, once per survey"""
    # 404 before anything else if the survey is gone
    SurveyStore(db).get_by_id(answer.survey)

    answers = AnswerStore(db)
    try:
        ensure_not_answered(answers, current_user.user_id, answer.survey)
        db_answer = answers.create(current_user.user_id, answer.survey, answer.value)
    except Conflict:
        DUPLICATE_ANSWER_COUNT.inc()
        raise

    ANSWER_COUNT.inc()
    logger.info(f"User {current_user.user_id} answered survey {answer.survey}")
    return {"answer": AnswerResponse.from_model(db_answer)}
