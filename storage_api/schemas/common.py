from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # Wire format is camelCase; Python side stays snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ErrorResponse(BaseModel):
    error: str


class SuccessResponse(BaseModel):
    success: bool = True
    message: str | None = None


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed input"},
    401: {"model": ErrorResponse, "description": "Missing or invalid API key"},
    403: {"model": ErrorResponse, "description": "Wrong role or not the owner"},
    404: {"model": ErrorResponse, "description": "Entity not found"},
}
