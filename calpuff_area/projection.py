"""WGS84 <-> UTM projection (pyproj)."""
import numpy as np
from pyproj import CRS, Transformer

from .config import PROJ_LONGLAT, PROJ_UTM


def utm_crs(zone: int, hemisphere: str = "N") -> CRS:
    """UTM CRS on WGS84 for a zone; Southern Hemisphere zones carry +south."""
    south = " +south" if hemisphere == "S" else ""
    return CRS.from_user_input(PROJ_UTM.format(zone=zone, south=south))


class UTMProjector:
    """Forward and inverse UTM transforms for arrays of points.

    Any object with the same ``forward``/``inverse`` signatures can stand in
    for this one (e.g. a fake projector in tests).
    """

    def __init__(self):
        self.geographic = CRS.from_user_input(PROJ_LONGLAT)

    def _transformer(self, zone: int, hemisphere: str, inverse: bool) -> Transformer:
        utm = utm_crs(zone, hemisphere)
        if inverse:
            return Transformer.from_crs(utm, self.geographic, always_xy=True)
        return Transformer.from_crs(self.geographic, utm, always_xy=True)

    def forward(self, lat, lon, zone: int, hemisphere: str) -> tuple[np.ndarray, np.ndarray]:
        """Project lat/lon (degrees) to UTM easting/northing (metres)."""
        transformer = self._transformer(zone, hemisphere, inverse=False)
        # always_xy: input order is (lon, lat)
        x_m, y_m = transformer.transform(
            np.asarray(lon, dtype=np.float64),
            np.asarray(lat, dtype=np.float64),
            errcheck=True,
        )
        return np.asarray(x_m), np.asarray(y_m)

    def inverse(self, x_m, y_m, zone: int, hemisphere: str) -> tuple[np.ndarray, np.ndarray]:
        """Unproject UTM easting/northing (metres) to lat/lon (degrees)."""
        transformer = self._transformer(zone, hemisphere, inverse=True)
        lon, lat = transformer.transform(
            np.asarray(x_m, dtype=np.float64),
            np.asarray(y_m, dtype=np.float64),
            errcheck=True,
        )
        return np.asarray(lat), np.asarray(lon)
