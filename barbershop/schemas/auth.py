from pydantic import BaseModel, Field

from barbershop.schemas._types import EmailText


class LoginPayload(BaseModel):
    email: EmailText
    password: str = Field(..., min_length=3)


class TokenResponse(BaseModel):
    token: str
