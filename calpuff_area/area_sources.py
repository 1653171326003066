"""Add area sources to a per-directory text file for later use in CALPUFF."""
from pathlib import Path
from typing import NamedTuple

import numpy as np

from .config import DEG_PRECISION, HEADER_COLUMNS, KM_PRECISION, N_VERTICES
from .projection import UTMProjector
from .utils import as_vertex_array, hemisphere_for_lat, output_filename, utm_zone_for_lon
from .validation import (
    validate_emission_units,
    validate_footprint,
    validate_hemisphere,
    validate_name,
    validate_scalar,
    validate_utm_zone,
)


class NormalizedCoordinates(NamedTuple):
    lat_dec_deg: np.ndarray
    lon_dec_deg: np.ndarray
    x_coord_km: np.ndarray
    y_coord_km: np.ndarray
    utm_zone: int
    utm_hemisphere: str


def ensure_output_file(directory: Path | None = None) -> Path:
    """Create the area sources file with its header row if it does not exist.

    The file is named after the last segment of ``directory`` (default: the
    current working directory) and lives inside it. An existing file is left
    untouched, header included.
    """
    directory = Path.cwd() if directory is None else Path(directory)
    file_path = directory / output_filename(directory)
    if not file_path.exists():
        with open(file_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(",".join(HEADER_COLUMNS) + "\n")
        print(f"Area sources file created: {file_path}")
    return file_path


def normalize_coordinates(
    lat_dec_deg=None,
    lon_dec_deg=None,
    x_coord_km=None,
    y_coord_km=None,
    utm_zone: int | None = None,
    utm_hemisphere: str | None = None,
    projector=None,
) -> NormalizedCoordinates:
    """Return both geographic and UTM coordinates for the 4 vertices.

    Whichever set the caller omits is derived from the other. When both are
    complete they are passed through as given. The UTM zone and hemisphere
    derived from geographic input come from the first vertex only, so a
    footprint straddling a zone boundary is projected in a single zone.
    """
    if utm_zone is not None:
        validate_utm_zone(utm_zone)
    if utm_hemisphere is not None:
        validate_hemisphere(utm_hemisphere)

    lon_lat_provided = lat_dec_deg is not None and lon_dec_deg is not None
    utm_provided = (
        x_coord_km is not None
        and y_coord_km is not None
        and utm_zone is not None
        and utm_hemisphere is not None
    )
    if not lon_lat_provided and not utm_provided:
        raise ValueError(
            "Provide either lat_dec_deg and lon_dec_deg, or x_coord_km, "
            "y_coord_km, utm_zone and utm_hemisphere"
        )

    if lon_lat_provided:
        lat_dec_deg = as_vertex_array(lat_dec_deg, "lat_dec_deg")
        lon_dec_deg = as_vertex_array(lon_dec_deg, "lon_dec_deg")
    if utm_provided:
        x_coord_km = as_vertex_array(x_coord_km, "x_coord_km")
        y_coord_km = as_vertex_array(y_coord_km, "y_coord_km")

    if projector is None and not (lon_lat_provided and utm_provided):
        projector = UTMProjector()

    if lon_lat_provided and not utm_provided:
        utm_zone = utm_zone_for_lon(lon_dec_deg[0])
        utm_hemisphere = hemisphere_for_lat(lat_dec_deg[0])
        x_m, y_m = projector.forward(lat_dec_deg, lon_dec_deg, utm_zone, utm_hemisphere)
        x_coord_km = np.asarray(x_m, dtype=np.float64) / 1000
        y_coord_km = np.asarray(y_m, dtype=np.float64) / 1000
    elif utm_provided and not lon_lat_provided:
        lat, lon = projector.inverse(
            x_coord_km * 1000, y_coord_km * 1000, utm_zone, utm_hemisphere
        )
        lat_dec_deg = np.asarray(lat, dtype=np.float64)
        lon_dec_deg = np.asarray(lon, dtype=np.float64)

    return NormalizedCoordinates(
        lat_dec_deg=lat_dec_deg,
        lon_dec_deg=lon_dec_deg,
        x_coord_km=x_coord_km,
        y_coord_km=y_coord_km,
        utm_zone=int(utm_zone),
        utm_hemisphere=utm_hemisphere,
    )


def _format_number(value, precision: int) -> str:
    return np.format_float_positional(float(value), precision=precision, trim="-")


def format_row(fields: dict) -> str:
    """Render one area source as a newline-terminated, comma-delimited line."""
    values = []
    for col in HEADER_COLUMNS:
        value = fields[col]
        if "_dec_deg_" in col:
            values.append(_format_number(value, DEG_PRECISION))
        elif "_coord_km_" in col:
            values.append(_format_number(value, KM_PRECISION))
        else:
            values.append(str(value))
    return ",".join(values) + "\n"


def _append_line(file_path: Path, line: str) -> None:
    with open(file_path, "a", encoding="utf-8", newline="\n") as f:
        f.write(line)


def append_row(file_path: Path, fields: dict) -> None:
    """Append one formatted row; the line is built before the file is opened."""
    _append_line(file_path, format_row(fields))


def _row_fields(
    src_name,
    species_name,
    coords: NormalizedCoordinates,
    effective_height,
    base_elev,
    init_sigma_z,
    emission_rate,
    emission_units,
) -> dict:
    fields = {"src_name": src_name, "species_name": species_name}
    for i in range(N_VERTICES):
        fields[f"lat_dec_deg_{i + 1}"] = coords.lat_dec_deg[i]
        fields[f"lon_dec_deg_{i + 1}"] = coords.lon_dec_deg[i]
    for i in range(N_VERTICES):
        fields[f"x_coord_km_{i + 1}"] = coords.x_coord_km[i]
        fields[f"y_coord_km_{i + 1}"] = coords.y_coord_km[i]
    fields.update({
        "UTM_zone": coords.utm_zone,
        "UTM_hemisphere": coords.utm_hemisphere,
        "effective_height": effective_height,
        "base_elev": base_elev,
        "init_sigma_z": init_sigma_z,
        "emission_rate": emission_rate,
        "emission_units": emission_units,
    })
    return fields


def calpuff_add_area_sources(
    src_name: str,
    species_name: str,
    lat_dec_deg=None,
    lon_dec_deg=None,
    x_coord_km=None,
    y_coord_km=None,
    utm_zone: int | None = None,
    utm_hemisphere: str | None = None,
    *,
    effective_height: float,
    base_elev: float,
    init_sigma_z: float,
    emission_rate: float,
    emission_units: str,
    directory: Path | None = None,
    projector=None,
) -> Path:
    """Append one area source to ``<dir name>--area_sources.txt`` in ``directory``.

    Parameters
    ----------
    src_name : Name of the source emitting the species.
    species_name : Name of the species undergoing emissions.
    lat_dec_deg, lon_dec_deg : 4 vertex latitudes/longitudes, decimal degrees (WGS84).
    x_coord_km, y_coord_km : 4 vertex UTM eastings/northings, km.
    utm_zone, utm_hemisphere : UTM zone (1-60) and hemisphere ('N' or 'S').
    effective_height : Effective height, m AGL.
    base_elev : Ground elevation at the source, m ASL.
    init_sigma_z : Initial sigma z, m.
    emission_rate : Constant emission rate, in ``emission_units``.
    emission_units : One of config.EMISSION_UNITS.
    directory : Output directory (default: current working directory).
    projector : Object with forward/inverse UTM transforms (default: UTMProjector).

    Either the geographic pair or the full UTM set must be given; the other
    is derived. Inputs are validated before the file is touched. Returns the
    path of the area sources file.
    """
    validate_name(src_name, "src_name")
    validate_name(species_name, "species_name")
    for value, name in (
        (effective_height, "effective_height"),
        (base_elev, "base_elev"),
        (init_sigma_z, "init_sigma_z"),
        (emission_rate, "emission_rate"),
    ):
        validate_scalar(value, name)
    validate_emission_units(emission_units)

    coords = normalize_coordinates(
        lat_dec_deg=lat_dec_deg,
        lon_dec_deg=lon_dec_deg,
        x_coord_km=x_coord_km,
        y_coord_km=y_coord_km,
        utm_zone=utm_zone,
        utm_hemisphere=utm_hemisphere,
        projector=projector,
    )

    footprint = validate_footprint(coords.x_coord_km, coords.y_coord_km)
    if not footprint["valid"]:
        print(
            f"  WARNING: {src_name}: vertices do not form a simple quadrilateral "
            f"(area {footprint['area_km2']} km2); check vertex order"
        )

    fields = _row_fields(
        src_name,
        species_name,
        coords,
        effective_height,
        base_elev,
        init_sigma_z,
        emission_rate,
        emission_units,
    )
    # Format before creating the file so a bad field never leaves a stray header
    line = format_row(fields)

    file_path = ensure_output_file(directory)
    _append_line(file_path, line)
    print(f"Area source written: {src_name} ({species_name}) -> {file_path.name}")
    return file_path
