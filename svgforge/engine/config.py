"""Engine configuration — constants shared by the assembler and strategies."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_COMPOSITION = "grid"


@dataclass(frozen=True)
class EngineConfig:
    """Controls the document envelope."""

    generator: str = "svgforge v1.0"
    default_composition: str = DEFAULT_COMPOSITION
    # Decimal places kept in emitted coordinates
    precision: int = 2
    xml_declaration: bool = False
