"""Validation API — check a record without storing it (client-side pre-submit)."""

from fastapi import APIRouter, Body

from formguard.validators import ValidationResult, validate

router = APIRouter()


@router.post("/validate", response_model=ValidationResult)
async def validate_input(payload: dict = Body(...)):
    """Validate a candidate record and report every violated rule.

    Always answers 200; `ok` tells the caller whether the record is valid.
    """
    return validate(payload)
