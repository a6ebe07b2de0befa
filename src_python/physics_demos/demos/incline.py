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

from ..geometry import point
from ..mechanics.incline import InclinedPlane
from .base import Demo

SCALE = 0.7

VECTOR_COLORS = {
    'G': '#e74c3c',
    'N': '#2ecc71',
    'f': '#3498db',
    'Gx': '#9b59b6',
}


class FrictionInclineDemo(Demo):
    """
    Block on a plank that is tilted until static friction gives way.

    The plank pivots about its right end. Force vectors are drawn in the
    plank frame: gravity straight down on screen, the normal force and
    friction along the plank axes, and the down-slope component Gx
    faded.
    """

    slug = 'friction-inclined-plane'
    title = '斜面上的静摩擦与滑动'
    width = 700
    height = 400
    pivot_x = 600
    pivot_y = 350
    plank_length = 500 * SCALE
    block_size = 60 * SCALE
    vector_scale = 2.0 * SCALE
    parameters = {'mu': (0, 1)}

    def __init__(self, **params):
        self.plane = InclinedPlane(block_size=self.block_size)
        super().__init__(**params)

    def _apply_parameter(self, name, value):
        self.plane.mu = value

    def _reset_state(self):
        self.plane.reset()

    def _before_play(self):
        if self.plane.finished:
            self.plane.reset()

    def _advance(self):
        return self.plane.step()

    def readout(self):
        forces = self.plane.forces()
        return {
            'angle': f'{self.plane.angle:.1f}°',
            'G': f'{forces.gravity:.1f} N',
            'N': f'{forces.normal:.1f} N',
            'Gx': f'{forces.parallel:.1f} N',
            'f_max': f'{forces.max_static_friction:.1f} N',
            'f': f'{forces.friction:.1f} N',
            'phase': self.plane.phase,
        }

    def draw(self, renderer):
        dwg = renderer.dwg
        plane = self.plane
        angle = plane.angle

        renderer.draw_line_segment(point(50, self.pivot_y), point(650, self.pivot_y),
                                   color='#7f8c8d', stroke_width=4, stroke_linecap='round', class_='ground')
        renderer.draw_point(point(self.pivot_x, self.pivot_y), color='#2c3e50', radius=6)

        # Plank frame: origin at the pivot, +x down the slope toward the pivot,
        # +y into the plank; rotating clockwise lifts the far (left) end
        plank = renderer.group(
            transform=f'translate({self.pivot_x},{self.pivot_y}) rotate({angle})',
            class_='plank'
        )
        plank.add(dwg.rect(
            insert=(-self.plank_length, -10 * SCALE), size=(self.plank_length, 20 * SCALE),
            rx=5 * SCALE, ry=5 * SCALE, fill='#d35400', stroke='#a04000', stroke_width=2 * SCALE
        ))

        block = plank.add(dwg.g(transform=f'translate({plane.position},0)', class_='block'))
        block.add(dwg.rect(
            insert=(-self.block_size / 2, -self.block_size - 10 * SCALE),
            size=(self.block_size, self.block_size),
            fill='#95a5a6', stroke='#7f8c8d', stroke_width=2 * SCALE
        ))

        forces = plane.forces()
        theta = plane.angle_rad
        cy = -10 * SCALE - self.block_size / 2
        origin = point(0, cy)
        s = self.vector_scale
        label_offset = 20 * SCALE

        g_len = forces.gravity * s
        vectors = [
            ('G', origin, g_len * math.sin(theta), g_len * math.cos(theta), 1.0),
            ('N', origin, 0, -forces.normal * s, 1.0),
            ('f', point(0, cy + self.block_size / 2), -forces.friction * s, 0, 1.0),
            ('Gx', origin, forces.parallel * s, 0, 0.5),
        ]
        for label, tail, dx, dy, opacity in vectors:
            vec = renderer.draw_vector(tail, dx, dy, VECTOR_COLORS[label], stroke_width=4 * SCALE,
                                       opacity=opacity, layer=block)
            if vec is None:
                continue
            length = math.hypot(dx, dy)
            lx = tail['x'] + dx + dx / length * label_offset
            ly = tail['y'] + dy + dy / length * label_offset
            # Counter-rotate so the text stays level on screen
            block.add(dwg.text(
                label, insert=(lx, ly), fill=VECTOR_COLORS[label], opacity=opacity,
                font_size=f'{24 * SCALE}px', font_weight='bold', font_family='sans-serif',
                text_anchor='middle', dominant_baseline='middle',
                transform=f'rotate({-angle},{lx},{ly})'
            ))

        status = {
            'resting': '静止状态',
            'raising': '抬升中',
            'sliding': '物体开始下滑！(Gₓ > f_max)',
            'bottom': '物体到达底端',
            'stalled': '已达最大倾角，物体未滑动',
        }[plane.phase]
        renderer.draw_text(status, point(20, 30), font_size='16px', class_='status')
