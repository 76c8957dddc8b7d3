"""Composition strategies — importing this package registers all of them."""

from svgforge.engine.strategies import (  # noqa: F401
    cluster,
    fractal,
    grid,
    radial,
    scatter,
    spiral,
    wave,
)
