"""SVG serialization."""
