"""
Copyright 2024 The Physics Demos authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from ..constants import AIR_REFRACTIVE_INDEX, WATER_REFRACTIVE_INDEX
from ..exceptions import InvalidParameterError
from ..geometry import point
from ..ray import Ray


@dataclass
class RefractionResult:
    """Rays and coefficients for one angle of incidence."""

    theta_i: float
    theta_t: Optional[float]
    reflectance: float
    transmittance: float
    rays: List[Ray] = field(default_factory=list)

    @property
    def total_internal_reflection(self):
        return self.theta_t is None

    def ray(self, role):
        """Return the ray with the given role, or None."""
        for r in self.rays:
            if r.role == role:
                return r
        return None


class Interface:
    """
    Flat boundary between two transparent media.

    The boundary is the line y = 0 with the normal along y. Light arrives
    from the upper medium (index n1, y > 0) and is partly reflected back
    into it and partly transmitted into the lower medium (index n2).

    Attributes:
        n1 (float): Refractive index of the incident medium
        n2 (float): Refractive index of the transmitting medium
    """

    def __init__(self, n1=AIR_REFRACTIVE_INDEX, n2=WATER_REFRACTIVE_INDEX):
        for name, n in (('n1', n1), ('n2', n2)):
            if not n >= 1:
                raise InvalidParameterError(f"Refractive index {name} must be >= 1, got {n}")
        self.n1 = n1
        self.n2 = n2

    @property
    def critical_angle(self):
        """Critical angle in radians, or None when n1 <= n2."""
        if self.n1 <= self.n2:
            return None
        return math.asin(self.n2 / self.n1)

    def _check_incidence(self, theta_i):
        if not 0 <= theta_i < math.pi / 2:
            raise InvalidParameterError(
                f"Angle of incidence must be in [0, 90) degrees, got {math.degrees(theta_i):.2f}"
            )

    def refraction_angle(self, theta_i):
        """
        Apply Snell's law n1·sin(θi) = n2·sin(θt).

        Args:
            theta_i (float): Angle of incidence in radians

        Returns:
            float or None: Angle of refraction in radians, or None on total
                           internal reflection
        """
        self._check_incidence(theta_i)
        sin_t = self.n1 / self.n2 * math.sin(theta_i)
        if sin_t > 1:
            return None
        return math.asin(sin_t)

    def fresnel(self, theta_i):
        """
        Unpolarized Fresnel reflectance and transmittance.

        Returns:
            tuple: (R, T) with R the mean of the s and p reflectances and
                   T = 1 - R clamped to [0, 1]
        """
        theta_t = self.refraction_angle(theta_i)
        if theta_t is None:
            return 1.0, 0.0

        ci = math.cos(theta_i)
        ct = math.cos(theta_t)
        rs = ((self.n1 * ci - self.n2 * ct) / (self.n1 * ci + self.n2 * ct)) ** 2
        rp = ((self.n1 * ct - self.n2 * ci) / (self.n1 * ct + self.n2 * ci)) ** 2
        reflectance = 0.5 * (rs + rp)
        transmittance = 1 - reflectance
        if not math.isfinite(transmittance) or transmittance < 0:
            transmittance = 0.0
        return reflectance, min(transmittance, 1.0)

    def trace(self, theta_i, length):
        """
        Build the incident, reflected and transmitted rays.

        All rays meet at the origin. The incident ray comes in from the
        upper left, the reflected ray leaves to the upper right at the same
        angle, and the transmitted ray continues into the lower right.

        Args:
            theta_i (float): Angle of incidence in radians
            length (float): Length of every ray

        Returns:
            RefractionResult
        """
        theta_t = self.refraction_angle(theta_i)
        reflectance, transmittance = self.fresnel(theta_i)
        origin = point(0, 0)

        rays = [
            Ray(point(-length * math.sin(theta_i), length * math.cos(theta_i)), origin,
                role='incident'),
            Ray(dict(origin), point(length * math.sin(theta_i), length * math.cos(theta_i)),
                brightness=reflectance, role='reflected'),
        ]
        if theta_t is not None:
            rays.append(Ray(dict(origin), point(length * math.sin(theta_t), -length * math.cos(theta_t)),
                            brightness=transmittance, role='transmitted'))

        return RefractionResult(
            theta_i=theta_i,
            theta_t=theta_t,
            reflectance=reflectance,
            transmittance=transmittance,
            rays=rays
        )
