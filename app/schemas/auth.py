"""Pydantic schemas for login."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LoginSchema(BaseModel):
    password: str | None = None


class LoginOutSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    token: str
    user_id: int
    username: str
