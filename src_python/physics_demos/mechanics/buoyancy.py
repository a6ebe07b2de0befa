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

from ..constants import GRAVITY, SPHERE_DRAG_COEFFICIENT, STEEL_DENSITY, WATER_DENSITY
from ..exceptions import InvalidParameterError


@dataclass
class BallFrame:
    """
    State of the ball at one integration step.

    Positions are canvas pixels with y growing downward; velocity is m/s
    with positive meaning downward. Forces are magnitudes in newtons
    except drag, which is signed along the velocity.
    """

    t: float
    y: float
    v: float
    gravity: float
    buoyancy: float
    drag: float
    normal: float
    net: float


class FallingBallSimulation:
    """
    Ball dropped from air into a tank of water.

    The motion is integrated with a fixed-step explicit Euler scheme under
    gravity, buoyancy of the submerged spherical cap and quadratic drag
    scaled by the immersed fraction. The tank floor stops the ball and
    supplies a normal force.

    Attributes:
        radius (float): Ball radius in metres
        fluid_density (float): Water density in kg/m^3
        ball_density (float): Ball density in kg/m^3
        drag_coefficient (float): Sphere drag coefficient
        pixels_per_meter (float): Canvas scale
        water_level (float): Canvas y of the water surface
        floor (float): Canvas y of the tank bottom
        start_y (float): Canvas y of the ball centre at release
        dt (float): Integration step in seconds
        duration (float): Simulated time span in seconds
        frames (list): BallFrame list filled by compute()
    """

    def __init__(self, radius=0.1, fluid_density=WATER_DENSITY, ball_density=STEEL_DENSITY,
                 drag_coefficient=SPHERE_DRAG_COEFFICIENT, pixels_per_meter=200,
                 water_level=200, floor=500, start_y=50, dt=0.001, duration=1.0):
        if not radius > 0:
            raise InvalidParameterError(f"Ball radius must be positive, got {radius}")
        if not fluid_density > 0:
            raise InvalidParameterError(f"Fluid density must be positive, got {fluid_density}")
        if not dt > 0 or not duration > 0:
            raise InvalidParameterError("Time step and duration must be positive")

        self.radius = radius
        self.fluid_density = fluid_density
        self.ball_density = ball_density
        self.drag_coefficient = drag_coefficient
        self.pixels_per_meter = pixels_per_meter
        self.water_level = water_level
        self.floor = floor
        self.start_y = start_y
        self.dt = dt
        self.duration = duration
        self.frames = []

    @property
    def volume(self):
        return 4 / 3 * math.pi * self.radius ** 3

    @property
    def mass(self):
        return self.ball_density * self.volume

    @property
    def cross_section(self):
        return math.pi * self.radius ** 2

    @property
    def resting_y(self):
        """Canvas y of the ball centre when it lies on the floor."""
        return self.floor - self.radius * self.pixels_per_meter

    def submerged_volume(self, y):
        """
        Volume of the ball below the water surface.

        Args:
            y (float): Canvas y of the ball centre

        Returns:
            float: Submerged volume in m^3 (a spherical cap when the ball
                   straddles the surface)
        """
        r = self.radius
        depth = (y - self.water_level) / self.pixels_per_meter
        if depth > r:
            return self.volume
        if depth < -r:
            return 0.0
        h = r + depth
        return math.pi * h ** 2 / 3 * (3 * r - h)

    def forces(self, y, v):
        """
        Evaluate the forces on the ball, applying floor contact.

        Returns:
            tuple: (y, v, gravity, buoyancy, drag, normal, net) where y and v
                   are clamped if the ball touches the floor
        """
        gravity = self.mass * GRAVITY
        submerged = self.submerged_volume(y)
        buoyancy = self.fluid_density * GRAVITY * submerged

        immersion = submerged / self.volume
        direction = 1 if v > 0 else -1
        drag = (0.5 * self.drag_coefficient * self.fluid_density * self.cross_section
                * v ** 2 * immersion * direction)

        normal = 0.0
        if y >= self.resting_y:
            y = self.resting_y
            v = 0.0
            drag = 0.0
            # Resting on the floor the forces balance: G = Fb + N
            normal = max(0.0, gravity - buoyancy)

        net = gravity - buoyancy - drag - normal
        return y, v, gravity, buoyancy, drag, normal, net

    def compute(self):
        """
        Integrate the motion over the full duration.

        Frames are taken at t = i * dt for i = 0 .. round(duration / dt).

        Returns:
            list: BallFrame per step
        """
        self.frames = []
        y = self.start_y
        v = 0.0
        steps = int(round(self.duration / self.dt))

        for i in range(steps + 1):
            t = i * self.dt
            y, v, gravity, buoyancy, drag, normal, net = self.forces(y, v)
            self.frames.append(BallFrame(
                t=t, y=y, v=v,
                gravity=gravity, buoyancy=buoyancy, drag=drag, normal=normal, net=net
            ))

            a = net / self.mass
            v += a * self.dt
            y += v * self.dt * self.pixels_per_meter

            if y > self.resting_y:
                y = self.resting_y
                v = 0.0

        return self.frames

    @property
    def end_time(self):
        if not self.frames:
            self.compute()
        return self.frames[-1].t

    def frame_at(self, t):
        """
        Look up the frame for a playback time.

        Returns:
            BallFrame: The first frame with frame.t >= t, or the last frame
        """
        if not self.frames:
            self.compute()
        for frame in self.frames:
            if frame.t >= t:
                return frame
        return self.frames[-1]

    def height_above_surface(self, frame):
        """Height of the ball centre above the water surface in metres."""
        return (self.water_level - frame.y) / self.pixels_per_meter
