from app.models.user import User
from app.models.survey import Survey
from app.models.answer import Answer

# This allows importing all models from app.models
