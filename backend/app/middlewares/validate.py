"""Schema validation stage for request bodies."""

from typing import Dict, List, Optional, Type

import pydantic
from pydantic import BaseModel
from starlette.responses import Response

from backend.app.core.errors import ValidationError
from backend.app.core.pipeline import RequestContext, Stage


def _field_errors(exc: pydantic.ValidationError) -> List[Dict[str, str]]:
    errors = []
    for error in exc.errors(include_url=False, include_context=False, include_input=False):
        field = ".".join(str(part) for part in error["loc"]) or "body"
        errors.append({"field": field, "message": error["msg"], "type": error["type"]})
    return errors


def validate(schema: Type[BaseModel]) -> Stage:
    """Build a stage that validates the JSON body against ``schema``.

    On success the validated model is stored on ``ctx.payload`` and the chain
    continues. On failure a 400 response lists each failing field; submitted
    values are never echoed back.
    """
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise TypeError(f"validate() expects a pydantic model class, got {schema!r}")

    def validation_stage(ctx: RequestContext) -> Optional[Response]:
        raw = ctx.body if ctx.body and ctx.body.strip() else b"{}"
        try:
            ctx.payload = schema.model_validate_json(raw)
        except pydantic.ValidationError as exc:
            return ValidationError(_field_errors(exc)).to_response()
        return None

    validation_stage.__name__ = f"validate_{schema.__name__}"
    return validation_stage
