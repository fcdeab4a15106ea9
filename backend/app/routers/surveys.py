from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging
from app.database import get_db
from app.models.user import User
from app.auth.token import get_current_user
from app.schemas.survey import SurveyCreate, SurveyUpdate, SurveyResponse, SurveyEnvelope, SurveyList, SurveyStats
from app.services.survey_store import SurveyStore
from app.services.answer_store import AnswerStore
from app.services.access import require_ownership
from app.services.stats import survey_stats
from app.monitoring import SURVEY_COUNT, STATS_LATENCY, TimerContextManager

router = APIRouter(prefix="/surveys", tags=["surveys"])
logger = logging.getLogger(__name__)

def get_survey_store(db: Session = Depends(get_db)) -> SurveyStore:
    return SurveyStore(db)

@router.get("", response_model=SurveyList)
async def list_surveys(
    current_user: User = Depends(get_current_user),
    surveys: SurveyStore = Depends(get_survey_store)
):
    """Get every survey"""
    return {"surveys": [SurveyResponse.from_model(s) for s in surveys.list_all()]}

@router.get("/{survey_id}", response_model=SurveyEnvelope)
async def get_survey(
    survey_id: int,
    current_user: User = Depends(get_current_user),
    surveys: SurveyStore = Depends(get_survey_store)
):
    survey = surveys.get_by_id(survey_id)
    return {"survey": SurveyResponse.from_model(survey)}

@router.get("/{survey_id}/stats", response_model=SurveyStats)
async def get_survey_stats(
    survey_id: int,
    include_unmatched: bool = True,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Share of respondents per option, e.g. {"pizza": 0.5, "hot dog": 0.5}.
    Answers that match no option show up under their own text unless
    include_unmatched is false.
    """
    survey = SurveyStore(db).get_by_id(survey_id)
    answers = AnswerStore(db).find_by_survey(survey_id)
    with TimerContextManager(STATS_LATENCY):
        return survey_stats(survey, answers, include_unmatched=include_unmatched)

@router.post("", response_model=SurveyEnvelope, status_code=status.HTTP_201_CREATED)
async def create_survey(
    survey: SurveyCreate,
    current_user: User = Depends(get_current_user),
    surveys: SurveyStore = Depends(get_survey_store)
):
    """Create a survey owned by the current user"""
    db_survey = surveys.create(current_user.user_id, survey.title, survey.options)
    SURVEY_COUNT.inc()
    return {"survey": SurveyResponse.from_model(db_survey)}

@router.patch("/{survey_id}", response_model=SurveyEnvelope)
async def update_survey(
    survey_id: int,
    patch: SurveyUpdate,
    current_user: User = Depends(get_current_user),
    surveys: SurveyStore = Depends(get_survey_store)
):
    """Update title or options; only the owner may do this"""
    db_survey = surveys.get_by_id(survey_id)
    require_ownership(current_user.user_id, db_survey)
    db_survey = surveys.update(survey_id, patch.model_dump(exclude_unset=True))
    return {"survey": SurveyResponse.from_model(db_survey)}

@router.delete("/{survey_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_survey(
    survey_id: int,
    current_user: User = Depends(get_current_user),
    surveys: SurveyStore = Depends(get_survey_store)
):
    db_survey = surveys.get_by_id(survey_id)
    require_ownership(current_user.user_id, db_survey)
    surveys.delete(survey_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
