"""svgforge — rule-driven procedural SVG composition."""

__version__ = "0.1.0"
