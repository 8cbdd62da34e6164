# api/schemas/auth.py
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

class SignUp(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: Optional[str] = None

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
