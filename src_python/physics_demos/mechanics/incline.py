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
from dataclasses import dataclass

from ..constants import GRAVITY
from ..exceptions import InvalidParameterError

RESTING = 'resting'
RAISING = 'raising'
SLIDING = 'sliding'
AT_BOTTOM = 'bottom'
STALLED = 'stalled'


@dataclass
class InclineForces:
    gravity: float
    normal: float
    parallel: float
    friction: float
    max_static_friction: float


class InclinedPlane:
    """
    Block resting on a plank that is slowly tilted about its lower end.

    The plank is raised a fixed angle per frame until the down-slope
    component of gravity exceeds the maximum static friction. From then on
    the block slides toward the pivot under kinetic friction (same
    coefficient) until it reaches the bottom.

    Positions are measured along the plank in canvas units, with the pivot
    at 0 and the block starting at a negative offset.

    Attributes:
        mu (float): Friction coefficient
        mass (float): Block mass in kg
        angle (float): Current tilt in degrees
        position (float): Block offset along the plank
        velocity (float): Block speed along the plank (per frame)
        sliding (bool): Whether the block has started to slip
        phase (str): One of resting, raising, sliding, bottom, stalled
    """

    def __init__(self, mu=0.5, mass=10, g=GRAVITY, start_position=-350 * 0.7,
                 block_size=60 * 0.7, angle_step=0.2, max_angle=80, time_scale=0.5):
        if mu < 0:
            raise InvalidParameterError(f"Friction coefficient must be >= 0, got {mu}")
        if not mass > 0:
            raise InvalidParameterError(f"Mass must be positive, got {mass}")
        self.mu = mu
        self.mass = mass
        self.g = g
        self.start_position = start_position
        self.block_size = block_size
        self.angle_step = angle_step
        self.max_angle = max_angle
        self.time_scale = time_scale
        self.reset()

    def reset(self):
        self.angle = 0.0
        self.position = self.start_position
        self.velocity = 0.0
        self.sliding = False
        self.phase = RESTING

    @property
    def angle_rad(self):
        return math.radians(self.angle)

    @property
    def critical_angle(self):
        """Tilt in degrees at which the block starts to slip."""
        return math.degrees(math.atan(self.mu))

    @property
    def finished(self):
        return self.phase in (AT_BOTTOM, STALLED)

    def forces(self):
        gravity = self.mass * self.g
        normal = gravity * math.cos(self.angle_rad)
        parallel = gravity * math.sin(self.angle_rad)
        max_static = self.mu * normal
        # Static friction exactly balances the slope component
        friction = self.mu * normal if self.sliding else parallel
        return InclineForces(
            gravity=gravity,
            normal=normal,
            parallel=parallel,
            friction=friction,
            max_static_friction=max_static
        )

    def step(self):
        """
        Advance one animation frame.

        Returns:
            bool: True while the block is still moving or being raised
        """
        if self.finished:
            return False

        forces = self.forces()

        if not self.sliding:
            if forces.parallel > forces.max_static_friction:
                self.sliding = True
                self.phase = SLIDING
            elif self.angle < self.max_angle:
                self.angle = min(self.angle + self.angle_step, self.max_angle)
                self.phase = RAISING
            else:
                self.phase = STALLED
                return False
            return True

        net = forces.parallel - self.mu * forces.normal
        self.velocity += net / self.mass * self.time_scale
        self.position += self.velocity

        if self.position > -self.block_size / 2:
            self.phase = AT_BOTTOM
            return False
        return True
