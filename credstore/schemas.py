from pydantic import BaseModel, Field, constr


UsernameStr = constr(min_length=4, max_length=20, pattern=r"^[A-Za-z0-9_.-]+$")


class AuthCredentialsIn(BaseModel):
    username: UsernameStr
    password: str = Field(min_length=8, max_length=72)


class SignInIn(BaseModel):
    username: str
    password: str


class SignUpOut(BaseModel):
    message: str


class SignInOut(BaseModel):
    username: str
