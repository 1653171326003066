"""Validation: area source inputs and footprint geometry."""
import math
import numbers

from shapely.geometry import Polygon

from .config import EMISSION_UNITS, HEMISPHERES, UTM_ZONES


def validate_emission_units(emission_units: str) -> None:
    """Raise if emission_units is not one of the supported CALPUFF unit strings."""
    if emission_units not in EMISSION_UNITS:
        raise ValueError(
            f"Unsupported emission_units {emission_units!r}; "
            f"expected one of: {', '.join(EMISSION_UNITS)}"
        )


def validate_hemisphere(utm_hemisphere: str) -> None:
    if utm_hemisphere not in HEMISPHERES:
        raise ValueError(
            f"utm_hemisphere must be 'N' or 'S', got {utm_hemisphere!r}"
        )


def validate_utm_zone(utm_zone) -> None:
    if (
        isinstance(utm_zone, bool)
        or not isinstance(utm_zone, numbers.Integral)
        or int(utm_zone) not in UTM_ZONES
    ):
        raise ValueError(f"utm_zone must be an integer from 1 to 60, got {utm_zone!r}")


def validate_name(value: str, name: str) -> None:
    """Names are written verbatim into a comma-delimited row."""
    text = str(value)
    if not text:
        raise ValueError(f"{name} must not be empty")
    for ch in (",", "\n", "\r"):
        if ch in text:
            raise ValueError(f"{name} must not contain {ch!r}: {text!r}")


def validate_footprint(x_coord_km, y_coord_km) -> dict:
    """Check the quadrilateral formed by the vertices, in the order given."""
    poly = Polygon(zip(x_coord_km, y_coord_km))
    is_valid = bool(poly.is_valid)
    area_km2 = float(poly.area)
    return {
        "valid": is_valid and area_km2 > 0,
        "is_valid": is_valid,
        "area_km2": round(area_km2, 6),
    }


def validate_scalar(value, name: str) -> None:
    """Physical parameters must be single finite numbers."""
    if (
        isinstance(value, bool)
        or not isinstance(value, numbers.Real)
        or not math.isfinite(value)
    ):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
