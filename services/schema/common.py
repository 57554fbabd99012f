# services/schema/common.py
import logging
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt
from pydantic import ValidationError as PydanticValidationError

from utils.errors import ValidationError

logger = logging.getLogger(__name__)

# JSON numbers: ints and floats both pass, numeric strings and booleans do not.
Number = Union[StrictInt, StrictFloat]

ModelT = TypeVar("ModelT", bound=BaseModel)


class RawModel(BaseModel):
    """
    Base for registry payload shapes.
    Every field is optional and nullable; unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def validate_payload(model: Type[ModelT], raw: Any, registry: str, label: str) -> ModelT:
    """
    Re-types a raw JSON payload with `model`.
    Shape mismatches become a ValidationError that keeps the raw payload.
    """
    try:
        return model.model_validate(raw)
    except PydanticValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        paths = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in errors[:5])
        logger.warning(f"⚠️ {registry}: {label} payload failed validation at {paths}")
        raise ValidationError(
            f"Failed to validate {label} data ({len(errors)} issue(s) at {paths})",
            registry=registry,
            raw_payload=raw,
            errors=errors,
        )
