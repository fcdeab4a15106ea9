from sqlalchemy import Column, String, Integer, TIMESTAMP, ForeignKey, UniqueConstraint, text
from sqlalchemy.orm import relationship
from app.database import Base

class Answer(Base):
    __tablename__ = "answers"
    __table_args__ = (
        UniqueConstraint("respondent_id", "survey_id", name="uq_answers_respondent_survey"),
    )

    answer_id = Column(Integer, primary_key=True, index=True)
    respondent_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    survey_id = Column(Integer, ForeignKey("surveys.survey_id", ondelete="CASCADE"), nullable=False, index=True)
    # Free text; not checked against the survey's options
    value = Column(String, nullable=False)
    created_at = Column(TIMESTAMP, server_default=text("CURRENT_TIMESTAMP"))

    survey = relationship("Survey", back_populates="answers")
