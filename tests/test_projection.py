"""UTM projection and zone derivation tests."""
import pytest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
import sys
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np
from pyproj import Transformer
from pyproj.exceptions import ProjError

from calpuff_area.projection import UTMProjector, utm_crs
from calpuff_area.utils import utm_zone_for_lon, hemisphere_for_lat

LAT = [45.0, 45.0, 45.1, 45.1]
LON = [-75.0, -74.9, -74.9, -75.0]


def test_zone_at_prime_meridian():
    """Longitude 0 falls in zone 31."""
    assert utm_zone_for_lon(0.0) == 31


def test_zone_at_antimeridian():
    """Both -180 and 180 wrap to zone 1."""
    assert utm_zone_for_lon(-180.0) == 1
    assert utm_zone_for_lon(180.0) == 1


def test_zone_always_in_range():
    """Derived zone is within 1-60 across the full longitude range."""
    zones = [utm_zone_for_lon(lon) for lon in np.linspace(-180, 180, 721)]
    assert min(zones) >= 1
    assert max(zones) <= 60


def test_zone_for_eastern_ontario():
    assert utm_zone_for_lon(-75.0) == 18


def test_hemisphere_from_latitude():
    """Latitude >= 0 is N, negative is S."""
    assert hemisphere_for_lat(0.0) == "N"
    assert hemisphere_for_lat(45.0) == "N"
    assert hemisphere_for_lat(-0.001) == "S"


def test_forward_matches_epsg_utm():
    """Forward projection agrees with EPSG:32618 (WGS84 / UTM 18N)."""
    x_m, y_m = UTMProjector().forward(LAT, LON, 18, "N")
    ref = Transformer.from_crs("EPSG:4326", "EPSG:32618", always_xy=True)
    ref_x, ref_y = ref.transform(LON, LAT)
    np.testing.assert_allclose(x_m, ref_x, atol=1e-3)
    np.testing.assert_allclose(y_m, ref_y, atol=1e-3)
    # central meridian of zone 18 is -75
    assert x_m[0] == pytest.approx(500000.0, abs=1e-3)


def test_round_trip_geographic():
    """lat/lon -> UTM -> lat/lon reproduces the input."""
    projector = UTMProjector()
    x_m, y_m = projector.forward(LAT, LON, 18, "N")
    lat, lon = projector.inverse(x_m, y_m, 18, "N")
    np.testing.assert_allclose(lat, LAT, atol=1e-4)
    np.testing.assert_allclose(lon, LON, atol=1e-4)


def test_round_trip_utm():
    """UTM -> lat/lon -> UTM reproduces the input."""
    projector = UTMProjector()
    x_m = np.array([500000.0, 507000.0, 507000.0, 500000.0])
    y_m = np.array([4983000.0, 4983000.0, 4994000.0, 4994000.0])
    lat, lon = projector.inverse(x_m, y_m, 18, "N")
    x2, y2 = projector.forward(lat, lon, 18, "N")
    np.testing.assert_allclose(x2, x_m, atol=1e-2)
    np.testing.assert_allclose(y2, y_m, atol=1e-2)


def test_southern_hemisphere_false_northing():
    """Southern zones use the 10,000 km false northing both ways."""
    projector = UTMProjector()
    lat = [-33.9, -33.9, -33.8, -33.8]
    lon = [151.1, 151.2, 151.2, 151.1]
    x_m, y_m = projector.forward(lat, lon, 56, "S")
    assert np.all(y_m > 6_000_000)
    ref = Transformer.from_crs("EPSG:4326", "EPSG:32756", always_xy=True)
    ref_x, ref_y = ref.transform(lon, lat)
    np.testing.assert_allclose(y_m, ref_y, atol=1e-3)
    lat2, lon2 = projector.inverse(x_m, y_m, 56, "S")
    np.testing.assert_allclose(lat2, lat, atol=1e-4)
    np.testing.assert_allclose(lon2, lon, atol=1e-4)


def test_utm_crs_is_wgs84():
    """UTM CRS sits on the WGS84 ellipsoid."""
    crs = utm_crs(31, "N")
    assert crs.is_projected
    assert crs.ellipsoid.semi_major_metre == pytest.approx(6378137.0)
    assert crs.ellipsoid.inverse_flattening == pytest.approx(298.257223563)


def test_inverse_out_of_domain_raises():
    """An easting far outside any UTM zone is an error, not inf/nan output."""
    x_m = np.full(4, 1e12)
    y_m = np.full(4, 5e6)
    with pytest.raises(ProjError):
        UTMProjector().inverse(x_m, y_m, 18, "N")
