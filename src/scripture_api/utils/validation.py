"""Schema validation of untyped callable payloads."""

import logging
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import CallableError, ErrorCode
from .helpers import format_validation_errors


logger = logging.getLogger("scripture_api.validation")

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_payload(schema: Type[SchemaT], data: Any) -> SchemaT:
    """
    Validate a raw payload against an operation schema.

    Defaults (language, translation) are applied here. All violations are
    collected into a single INVALID_ARGUMENT error; nothing is partially
    accepted.

    Args:
        schema: Pydantic model describing the operation input
        data: Whatever the client sent in ``data``

    Returns:
        The validated, normalized request

    Raises:
        CallableError: INVALID_ARGUMENT listing every violated field
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        errors = format_validation_errors(e.errors())
        logger.error("Validation failed for %s: %s", schema.__name__, errors)
        raise CallableError(ErrorCode.INVALID_ARGUMENT, f"Invalid data: {errors}") from None
