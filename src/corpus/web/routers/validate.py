"""Corpus file validation endpoints."""

from fastapi import APIRouter

from corpus.application.config import load_config_from_dict, validate_config
from corpus.web.schemas.requests import ConfigValidateRequest
from corpus.web.schemas.responses import ErrorResponseSchema, ValidationResultSchema

router = APIRouter(
    prefix="/validate",
    tags=["validate"],
    responses={422: {"model": ErrorResponseSchema}},
)


@router.post("", response_model=ValidationResultSchema)
async def validate_corpus_file(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a corpus file without saving it.

    Schema errors are returned as 422 by the ConfigError handler; advisory
    findings come back as warnings.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
