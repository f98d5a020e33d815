from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from pothub.core.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Pot ids come from a signed 64-bit integer column.
POT_ID_MAX = 2**63 - 1

PotId = Annotated[int, Field(ge=1, le=POT_ID_MAX)]


class StatusResponse(BaseModel):
    status: str


def decode(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a decoded JSON body against ``model``.

    Raises ``ValidationError`` carrying pydantic's error list instead of
    letting a partially-bound object through.
    """
    if not isinstance(payload, dict):
        raise ValidationError(f"{model.__name__} body must be a JSON object")
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        raise ValidationError(f"Invalid {model.__name__} payload", errors) from exc
