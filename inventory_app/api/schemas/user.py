from pydantic import BaseModel


# Browser forms: every field defaults to "" so a missing field is reported
# inline on the page instead of as a 400 JSON body.
class LoginForm(BaseModel):
    username: str = ""
    password: str = ""


class RegisterForm(BaseModel):
    username: str = ""
    password: str = ""
    role: str = ""
