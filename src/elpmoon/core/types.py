from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

import numpy as np

Frame = Literal["elp", "date", "elp-xyz", "j2000", "fk5"]


@dataclass(frozen=True)
class SphericalPoint:
    """Geocentric spherical position: longitude/latitude in arcseconds, distance in km."""
    longitude: float
    latitude: float
    distance: float

    @property
    def longitude_deg(self) -> float:
        return (self.longitude / 3600.0) % 360.0

    @property
    def latitude_deg(self) -> float:
        return self.latitude / 3600.0


@dataclass(frozen=True)
class CartesianPoint:
    """Geocentric rectangular position in km."""
    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, v) -> "CartesianPoint":
        return cls(float(v[0]), float(v[1]), float(v[2]))

    def norm(self) -> float:
        return float(np.linalg.norm(self.as_array()))
