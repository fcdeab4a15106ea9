from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import id_in_range
from app.errors import NotFound, ValidationError
from app.models.survey import Survey, MIN_OPTIONS, MAX_OPTIONS

logger = logging.getLogger(__name__)

# Positional patch keys, option1 .. option5
OPTION_KEYS = [f"option{n}" for n in range(1, MAX_OPTIONS + 1)]


# ──────────────────────────────────────────────────────────────────────────
# Validation helpers
# ──────────────────────────────────────────────────────────────────────────

def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def validate_title(title: Optional[str]) -> str:
    if _is_blank(title):
        raise ValidationError("Please add a survey question")
    return title


def validate_options(options: Optional[List[str]]) -> List[str]:
    """Check that options form a 2..5 list of distinct, non-empty strings"""
    options = list(options or [])
    if len(options) < MIN_OPTIONS or any(_is_blank(o) for o in options[:MIN_OPTIONS]):
        raise ValidationError(f"You must provide at least {MIN_OPTIONS} options")
    if len(options) > MAX_OPTIONS:
        raise ValidationError(f"A survey can have at most {MAX_OPTIONS} options")
    if any(_is_blank(o) for o in options):
        raise ValidationError("Survey options cannot be blank")
    # Stats key on the option text, so two equal options would share a slot
    if len(set(options)) != len(options):
        raise ValidationError("Survey options must be different from each other")
    return options


def remove_blanks(patch: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None or an empty string"""
    return {key: value for key, value in patch.items() if not _is_blank(value)}


def apply_option_patch(options: List[str], patch: Dict[str, Any]) -> List[str]:
    """
    Merge positional ``optionN`` keys from a patch into an option list.

    A key replaces the option at its position, or appends when it names the
    next free slot. Keys are consumed from ``patch``.
    """
    options = list(options)
    for index, key in enumerate(OPTION_KEYS):
        if key not in patch:
            continue
        value = patch.pop(key)
        if index < len(options):
            options[index] = value
        elif index == len(options):
            options.append(value)
        else:
            raise ValidationError(f"Cannot set {key} before option{len(options) + 1}")
    return options


# ──────────────────────────────────────────────────────────────────────────
# Store
# ──────────────────────────────────────────────────────────────────────────

class SurveyStore:
    """Persistence for survey definitions, bound to one session"""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {str(e)}")
            raise

    def create(self, owner_id: int, title: str, options: List[str]) -> Survey:
        survey = Survey(
            title=validate_title(title),
            options=validate_options(options),
            owner_id=owner_id,
        )
        self.db.add(survey)
        self._commit("create survey")
        self.db.refresh(survey)
        logger.info(f"Survey {survey.survey_id} created by user {owner_id}")
        return survey

    def get_by_id(self, survey_id: int) -> Survey:
        # Ids the column cannot hold cannot exist
        survey = self.db.get(Survey, survey_id) if id_in_range(survey_id) else None
        if survey is None:
            raise NotFound("Survey not found")
        return survey

    def list_all(self) -> List[Survey]:
        return self.db.query(Survey).order_by(Survey.survey_id).all()

    def update(self, survey_id: int, patch: Dict[str, Any]) -> Survey:
        survey = self.get_by_id(survey_id)

        patch = remove_blanks(patch)
        # The owner is fixed at creation
        patch.pop("owner", None)
        patch.pop("owner_id", None)

        options = list(patch.pop("options", survey.options))
        options = apply_option_patch(options, patch)
        title = patch.pop("title", survey.title)
        if patch:
            logger.debug(f"Ignoring unknown survey fields: {sorted(patch)}")

        # Validate everything before touching the row
        title = validate_title(title)
        options = validate_options(options)
        survey.title = title
        survey.options = options

        self._commit(f"update survey {survey_id}")
        self.db.refresh(survey)
        logger.info(f"Survey {survey.survey_id} updated")
        return survey

    def delete(self, survey_id: int) -> None:
        survey = self.get_by_id(survey_id)
        self.db.delete(survey)
        self._commit(f"delete survey {survey_id}")
        logger.info(f"Survey {survey_id} deleted")
