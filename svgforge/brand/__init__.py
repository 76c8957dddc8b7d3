"""Brand policy — allowed vocabulary and bounds for generation requests."""

from svgforge.brand.config import BrandConfig, BrandConfigError, load_brand_config
from svgforge.brand.validation import validate_rules

__all__ = ["BrandConfig", "BrandConfigError", "load_brand_config", "validate_rules"]
