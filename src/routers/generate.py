"""
Generate Router
================
HTTP access to the schema-driven generator: single payloads, batches, and
the lists of supported date formats and phone country codes.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException

from core import config
from core.constants import COUNTRIES_CODE_PHONE, MONTH_ABBREVIATIONS, SUPPORTED_DATE_FORMATS
from core.errors import JsonGenerationError
from utils.json_generator import JsonGenerator

logger = logging.getLogger(config.LOGGER_NAME)

router = APIRouter()

generator = JsonGenerator()


def _generate_or_400(schema: Dict[str, Any]) -> Any:
    if not isinstance(schema, dict) or "type" not in schema:
        raise HTTPException(status_code=400, detail="Body must be a schema object with a 'type' field")
    try:
        return generator.generate_json_from_schema(schema)
    except JsonGenerationError as exc:
        logger.warning(f"⚠️  Generation failed: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/generate")
def generate(schema: Dict[str, Any] = Body(...)):
    """
    Generate one JSON value from the schema in the request body.

    Example body:
        {"type": "object", "properties": {"id": {"type": "integer", "minimum": 1}}}
    """
    return _generate_or_400(schema)


@router.post("/generate/batch")
def generate_batch(count: int = 10, schema: Dict[str, Any] = Body(...)):
    """
    Generate `count` independent values from the same schema.

    Query params:
      - count: number of values, between 1 and MAX_BATCH_SIZE (default: 10)
    """
    if count < 1 or count > config.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"count must be between 1 and {config.MAX_BATCH_SIZE}, got {count}"
        )
    return [_generate_or_400(schema) for _ in range(count)]


@router.get("/formats")
def get_formats():
    """Date formats, month abbreviations and phone country codes the generator knows."""
    return {
        "date_formats": SUPPORTED_DATE_FORMATS,
        "month_abbreviations": MONTH_ABBREVIATIONS,
        "country_codes": sorted(COUNTRIES_CODE_PHONE.keys()),
        "default_country_code": config.DEFAULT_COUNTRY_CODE,
    }


@router.get("/health")
def health():
    return {"status": "ok"}
