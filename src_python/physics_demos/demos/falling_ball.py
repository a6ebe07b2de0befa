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

from ..geometry import point
from ..mechanics.buoyancy import FallingBallSimulation
from .base import Demo, SCRUBBING

FORCE_COLORS = {
    'G': '#e74c3c',
    'Fb': '#3498db',
    'Fd': '#f1c40f',
    'N': '#9b59b6',
}


class FallingBallDemo(Demo):
    """
    Steel ball dropped into water, replayed from a precomputed trajectory.

    Changing the fluid density or the ball radius recomputes the whole
    trajectory. The time slider scrubs through it; playing advances the
    playback clock by one display frame (16 ms) per step.
    """

    slug = 'falling-ball-in-water'
    title = '钢球在水中下落'
    frame_time = 0.016
    arrow_scale = 0.5
    min_arrow_length = 5
    parameters = {
        'density': (500, 2000),
        'radius': (0.05, 0.2),
        'time': (0, 1.0),
    }

    def __init__(self, **params):
        self.density = 1000.0
        self.radius = 0.1
        self.time = 0.0
        self._recompute()
        super().__init__(**params)

    def _recompute(self):
        self.simulation = FallingBallSimulation(
            radius=self.radius,
            fluid_density=self.density,
            floor=self.height
        )
        self.simulation.compute()

    @property
    def frame(self):
        return self.simulation.frame_at(self.time)

    def _apply_parameter(self, name, value):
        if name == 'time':
            self.status = SCRUBBING
            self.time = min(value, self.simulation.end_time)
            return
        setattr(self, name, value)
        self._recompute()
        self.time = min(self.time, self.simulation.end_time)

    def _reset_state(self):
        self.time = 0.0

    def _before_play(self):
        if self.time >= self.simulation.end_time:
            self.time = 0.0

    def _advance(self):
        self.time += self.frame_time
        if self.time >= self.simulation.end_time:
            self.time = self.simulation.end_time
            return False
        return True

    def readout(self):
        frame = self.frame
        return {
            'time': f'{frame.t:.2f}',
            'h': f'{self.simulation.height_above_surface(frame):.2f} m',
            'v': f'{frame.v:.2f} m/s',
            'G': f'{frame.gravity:.2f} N',
            'Fb': f'{frame.buoyancy:.2f} N',
            'Fd': f'{abs(frame.drag):.2f} N',
            'N': f'{frame.normal:.2f} N',
            'Fnet': f'{frame.net:.2f} N',
        }

    def draw(self, renderer):
        sim = self.simulation
        frame = self.frame
        width = renderer.width
        cx = width / 2
        radius_px = sim.radius * sim.pixels_per_meter

        renderer.layer_objects.add(renderer.dwg.rect(
            insert=(0, sim.water_level), size=(width, renderer.height - sim.water_level),
            fill='rgb(52,152,219)', fill_opacity=0.5, stroke='none', class_='water'
        ))
        renderer.draw_line_segment(point(0, sim.water_level), point(width, sim.water_level),
                                   color='#2980b9', stroke_width=2, class_='water-surface')
        renderer.layer_objects.add(renderer.dwg.circle(
            center=(cx, frame.y), r=radius_px,
            fill='#95a5a6', stroke='#7f8c8d', stroke_width=2, class_='ball'
        ))

        center = point(cx, frame.y)
        bottom = point(cx, frame.y + radius_px)
        scale = self.arrow_scale
        # Drag opposes the velocity: up while sinking, down while rising
        drag_dy = -abs(frame.drag) * scale if frame.drag > 0 else abs(frame.drag) * scale
        vectors = [
            ('G', center, frame.gravity * scale),
            ('Fb', center, -frame.buoyancy * scale),
            ('N', bottom, -frame.normal * scale),
            ('Fd', center, drag_dy),
        ]
        for label, origin, dy in vectors:
            renderer.draw_vector(origin, 0, dy, FORCE_COLORS[label], label=label,
                                 min_length=self.min_arrow_length)
