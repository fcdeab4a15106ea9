from pydantic import BaseModel, model_validator
from typing import List, Optional, Dict, Any
from datetime import datetime

OPTIONAL_OPTION_KEYS = ["option3", "option4", "option5"]

def _unwrap(data: Any, key: str) -> Any:
    """Accept both {"survey": {...}} and the bare object"""
    if isinstance(data, dict) and isinstance(data.get(key), dict):
        return data[key]
    return data

class SurveyCreate(BaseModel):
    title: Optional[str] = None
    options: Optional[List[str]] = None

    @model_validator(mode="before")
    @classmethod
    def fold_positional_options(cls, data: Any) -> Any:
        data = _unwrap(data, "survey")
        if not isinstance(data, dict) or data.get("options") is not None:
            return data
        if not any(k.startswith("option") for k in data):
            return data
        # option1/option2 are kept even when missing so the store reports them;
        # absent optional slots are skipped
        options = [data.get("option1"), data.get("option2")]
        options += [data[k] for k in OPTIONAL_OPTION_KEYS if data.get(k)]
        return {"title": data.get("title"), "options": options}

class SurveyUpdate(BaseModel):
    """Partial update; unknown keys such as ``owner`` are dropped"""
    title: Optional[str] = None
    options: Optional[List[str]] = None
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    option4: Optional[str] = None
    option5: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def unwrap(cls, data: Any) -> Any:
        return _unwrap(data, "survey")

class SurveyResponse(BaseModel):
    id: int
    title: str
    options: List[str]
    owner: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, survey) -> "SurveyResponse":
        return cls(
            id=survey.survey_id,
            title=survey.title,
            options=list(survey.options),
            owner=survey.owner_id,
            created_at=survey.created_at,
            updated_at=survey.updated_at,
        )

class SurveyEnvelope(BaseModel):
    survey: SurveyResponse

class SurveyList(BaseModel):
    surveys: List[SurveyResponse]

SurveyStats = Dict[str, float]
