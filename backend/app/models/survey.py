from sqlalchemy import Column, String, Integer, TIMESTAMP, JSON, ForeignKey, text, func
from sqlalchemy.orm import relationship
from app.database import Base

MIN_OPTIONS = 2
MAX_OPTIONS = 5

class Survey(Base):
    __tablename__ = "surveys"

    survey_id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    # Ordered list of 2-5 option strings; stats address them by position
    options = Column(JSON, nullable=False)
    owner_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(TIMESTAMP, server_default=text("CURRENT_TIMESTAMP"))
    updated_at = Column(TIMESTAMP, server_default=text("CURRENT_TIMESTAMP"), onupdate=func.now())

    answers = relationship("Answer", back_populates="survey", cascade="all, delete-orphan")
