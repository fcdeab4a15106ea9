from pydantic import BaseModel, Field

class UserCreate(BaseModel):
    email: str = Field(min_length=3)  # Consider using EmailStr if email-validator is installed
    password: str = Field(min_length=1)

class UserLogin(BaseModel):
    email: str
    password: str

class TokenResponse(BaseModel):
    message: str
    user_id: int
    access_token: str
    token_type: str
