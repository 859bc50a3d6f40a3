"""Great-circle distances between contacts and candidates."""

import numpy as np

from models.schemas.candidate import Candidate
from models.schemas.contact import Contact

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1, lon1, lat2, lon2):
    """Haversine distance in km.

    Accepts scalars or numpy arrays (broadcast). Scalars return a float.
    No rounding happens here; callers round at the response boundary.
    """
    lat1, lon1, lat2, lon2 = (np.radians(np.asarray(v, dtype=float)) for v in (lat1, lon1, lat2, lon2))
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    # clip guards against a creeping past 1.0 for antipodal points
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(np.clip(1 - a, 0.0, None)))
    result = EARTH_RADIUS_KM * c

    if np.ndim(result) == 0:
        return float(result)
    return result


def pool_distances(contact: Contact, candidates: list[Candidate]) -> list[float | None]:
    """Vectorized distances for a whole candidate pool, None where unknown."""
    if not candidates:
        return []
    if not contact.has_coordinates:
        return [None] * len(candidates)

    known = [i for i, c in enumerate(candidates) if c.has_coordinates]
    distances: list[float | None] = [None] * len(candidates)
    if not known:
        return distances

    lats = np.array([candidates[i].latitude for i in known])
    lons = np.array([candidates[i].longitude for i in known])
    values = np.atleast_1d(distance_km(contact.latitude, contact.longitude, lats, lons))
    for i, value in zip(known, values):
        distances[i] = float(value)
    return distances


def round_km(value: float | None) -> float | None:
    """One-decimal rounding for display; keeps None as None."""
    if value is None:
        return None
    return round(value, 1)
