from pydantic import BaseModel, model_validator
from typing import List, Optional, Any
from datetime import datetime

class AnswerCreate(BaseModel):
    survey: int
    value: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def unwrap(cls, data: Any) -> Any:
        # Accept both {"answer": {...}} and the bare object
        if isinstance(data, dict) and isinstance(data.get("answer"), dict):
            return data["answer"]
        return data

class AnswerResponse(BaseModel):
    id: int
    respondent: int
    survey: int
    value: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, answer) -> "AnswerResponse":
        return cls(
            id=answer.answer_id,
            respondent=answer.respondent_id,
            survey=answer.survey_id,
            value=answer.value,
            created_at=answer.created_at,
        )

class AnswerEnvelope(BaseModel):
    answer: AnswerResponse

class AnswerList(BaseModel):
    answers: List[AnswerResponse]
