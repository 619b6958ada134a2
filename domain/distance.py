import numpy as np
from pyproj import Geod

from bikeshare.divvy.constants import EARTH_RADIUS_M

# Sphere of mean earth radius, so inv() yields great-circle values
_geod = Geod(a=EARTH_RADIUS_M, b=EARTH_RADIUS_M)

# Function to calculate the distance between two points

def calc_air_distance_p_to_p(point1, point2) -> float:

    """
    Calculate the great-circle distance in meters between two points.
    Points should be in the format of (longitude, latitude).
    """

    lon1, lat1 = point1
    lon2, lat2 = point2

    _, _, distance = _geod.inv(lon1, lat1, lon2, lat2)

    return(distance)


def calc_initial_bearing(point1, point2) -> float:
    """Initial bearing from point1 to point2 in degrees, clockwise from north, [0, 360)."""
    lon1, lat1 = point1
    lon2, lat2 = point2

    azimuth, _, _ = _geod.inv(lon1, lat1, lon2, lat2)

    return azimuth % 360.0


def calc_distance_and_bearing(lons1, lats1, lons2, lats2):
    """Vectorised variant: (meters, bearing degrees in [0, 360)) arrays."""
    azimuth, _, distance = _geod.inv(
        np.asarray(lons1, dtype=float),
        np.asarray(lats1, dtype=float),
        np.asarray(lons2, dtype=float),
        np.asarray(lats2, dtype=float),
    )
    return np.asarray(distance), np.mod(np.asarray(azimuth), 360.0)
