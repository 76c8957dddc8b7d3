"""POST /api/generate and POST /api/batch — rules in, SVG out."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from svgforge.brand.config import BrandConfig
from svgforge.brand.validation import validate_rules
from svgforge.config import Settings
from svgforge.dependencies import get_brand_config, get_engine, get_settings
from svgforge.engine.generator import Generator
from svgforge.engine.random_stream import SeededRandom
from svgforge.engine.rules import GenerationRules, RulesError
from svgforge.engine.variation import VariationSpec, apply_variations
from svgforge.models.requests import BatchRequest, GenerateRequest
from svgforge.models.responses import BatchItem, BatchResponse

logger = logging.getLogger(__name__)

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml"


@router.post("/generate")
def generate(
    req: GenerateRequest,
    brand: BrandConfig = Depends(get_brand_config),
    engine: Generator = Depends(get_engine),
) -> Response:
    if not req.rules:
        raise HTTPException(status_code=400, detail="Missing required parameter: rules")

    try:
        rules = GenerationRules.from_dict(validate_rules(req.rules, brand))
        result = engine.compose(rules)
    except RulesError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    svg = engine.to_svg(rules, result)
    logger.info("generate: %s, %d shapes, %d dropped", result.strategy, result.count, result.dropped)
    return Response(
        content=svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"X-Shapes-Dropped": str(result.dropped)},
    )


@router.post("/batch", response_model=BatchResponse)
def batch(
    req: BatchRequest,
    brand: BrandConfig = Depends(get_brand_config),
    engine: Generator = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> BatchResponse:
    if not req.rules_list or not req.count:
        raise HTTPException(status_code=400, detail="Missing required parameters: rulesList and count")
    if req.count > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"count exceeds the batch limit of {settings.max_batch_size}",
        )

    spec = VariationSpec.from_dict(req.variations)
    results: list[BatchItem] = []

    for i in range(req.count):
        raw = req.rules_list[i % len(req.rules_list)]
        try:
            base = GenerationRules.from_dict(validate_rules(raw, brand))
            # Re-validate: variations may step outside the brand vocabulary
            varied = apply_variations(base, spec, SeededRandom(base.seed + i))
            rules = GenerationRules.from_dict(validate_rules(varied.to_dict(), brand))
            result = engine.compose(rules)
        except RulesError as e:
            raise HTTPException(status_code=422, detail=f"batch member {i + 1}: {e}") from e

        results.append(BatchItem(
            index=i + 1,
            svg=engine.to_svg(rules, result),
            rules=rules.to_dict(),
            shapes_dropped=result.dropped,
        ))

    logger.info("batch: %d documents generated", len(results))
    return BatchResponse(count=len(results), results=results)
