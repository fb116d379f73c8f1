from pydantic import EmailStr
from sqlmodel import Field, SQLModel


class LoginEmailRequest(SQLModel):
    email: EmailStr = Field(max_length=255)


class LoginVerifyRequest(SQLModel):
    email: EmailStr = Field(max_length=255)
    token: str = Field(min_length=1, max_length=255)


# Generic message
class Message(SQLModel):
    message: str


# JSON payload containing the session token
class Token(SQLModel):
    access_token: str
    token_type: str = Field(
        default="bearer", description="Type of the token, usually 'bearer'"
    )
