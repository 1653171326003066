"""Utility functions: file naming, UTM zone, coordinate arrays."""
from pathlib import Path

import numpy as np

from .config import AREA_SOURCES_SUFFIX, N_VERTICES


def output_filename(directory: Path) -> str:
    """Name of the area sources file for a directory (last path segment + suffix)."""
    return f"{Path(directory).resolve().name}{AREA_SOURCES_SUFFIX}"


def utm_zone_for_lon(lon: float) -> int:
    """UTM zone (1-60) containing a longitude in decimal degrees."""
    return int(np.floor((lon + 180.0) / 6.0)) % 60 + 1


def hemisphere_for_lat(lat: float) -> str:
    return "N" if lat >= 0 else "S"


def as_vertex_array(values, name: str) -> np.ndarray:
    """Coerce one coordinate component to a float array of exactly N_VERTICES."""
    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be numeric, got {values!r}") from e
    if arr.ndim != 1:
        raise ValueError(
            f"Expected {N_VERTICES} values for {name}, got shape {arr.shape}"
        )
    if arr.size != N_VERTICES:
        raise ValueError(
            f"Expected {N_VERTICES} values for {name}, got {arr.size}"
        )
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values: {arr.tolist()}")
    return arr
