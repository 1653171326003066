"""Configuration and constants."""
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

AREA_SOURCES_SUFFIX = "--area_sources.txt"
N_VERTICES = 4

HEADER_COLUMNS = (
    ["src_name", "species_name"]
    + [f"{axis}_dec_deg_{i}" for i in range(1, N_VERTICES + 1) for axis in ("lat", "lon")]
    + [f"{axis}_coord_km_{i}" for i in range(1, N_VERTICES + 1) for axis in ("x", "y")]
    + [
        "UTM_zone",
        "UTM_hemisphere",
        "effective_height",
        "base_elev",
        "init_sigma_z",
        "emission_rate",
        "emission_units",
    ]
)

EMISSION_UNITS = (
    "g/m2/s",
    "kg/m2/hr",
    "lb/m2/hr",
    "tons/m2/yr",
    "Odour Unit * m/s",
    "Odour Unit * m/min",
    "metric tons/m2/yr",
    "Bq/m2/s",
    "GBq/m2/yr",
)

HEMISPHERES = ("N", "S")
UTM_ZONES = range(1, 61)

# PROJ strings, WGS84 throughout
PROJ_LONGLAT = "+proj=longlat +ellps=WGS84 +datum=WGS84 +no_defs"
PROJ_UTM = "+proj=utm +zone={zone}{south} +ellps=WGS84 +datum=WGS84 +units=m +no_defs"

# Digits after the decimal point in written rows
DEG_PRECISION = 6
KM_PRECISION = 3
