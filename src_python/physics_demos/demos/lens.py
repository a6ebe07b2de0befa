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

from ..constants import (
    IMAGE_COLOR,
    LENS_COLOR,
    LENS_MAX_IMAGE_DISTANCE,
    OBJECT_COLOR,
    RAY_COLOR,
)
from ..geometry import point
from ..optics.thin_lens import ThinLens, trace_principal_rays
from .base import Demo


class LensDemo(Demo):
    """
    Object arrow moving toward a thin lens, with principal-ray construction.

    The slider sets the object distance u. Playing the animation walks the
    object toward the lens until it is 30 px away.
    """

    center_x = 400
    center_y = 250
    focal_length = 100
    lens_height = 200
    lens_width = 30
    axis_length = 700
    object_height = 60
    animation_speed = 0.5
    initial_u = 300
    restart_u = 350
    min_u = 30
    parameters = {'u': (10, 400)}

    def __init__(self, **params):
        self.lens = ThinLens(self.focal_length)
        self.u = self.initial_u
        super().__init__(**params)

    @property
    def image(self):
        return self.lens.image(self.u)

    def to_canvas(self, p):
        return {'x': self.center_x + p['x'], 'y': self.center_y - p['y']}

    def _apply_parameter(self, name, value):
        self.u = value

    def _reset_state(self):
        self.u = self.initial_u

    def _before_play(self):
        if self.u <= self.min_u + 5:
            self.u = self.restart_u

    def _next_u(self):
        return self.u - self.animation_speed

    def _advance(self):
        next_u = self._next_u()
        if next_u <= self.min_u:
            return False
        self.u = next_u
        return True

    def readout(self):
        image = self.image
        return {
            'u': round(self.u),
            'v': '∞' if math.isinf(image.v) else round(image.v),
            'm': '∞' if math.isinf(image.m) else f'{image.m:.2f}',
            'type': image.describe(),
        }

    def _draw_static(self, renderer):
        cx, cy = self.center_x, self.center_y
        half_axis = self.axis_length / 2
        renderer.draw_line_segment(point(cx - half_axis, cy), point(cx + half_axis, cy),
                                   color='#7f8c8d', stroke_width=1, class_='axis')
        renderer.draw_lens(point(cx, cy), self.lens_height, self.lens_width, self.lens.focal_length,
                           color=LENS_COLOR)

        f = abs(self.focal_length)
        markers = [
            (cx - f, 'F', 20),
            (cx - 2 * f, '2F', 20),
            (cx + f, "F'", 20),
            (cx + 2 * f, "2F'", 20),
            (cx, 'O', 15),
        ]
        for x, label, offset in markers:
            renderer.draw_point(point(x, cy), color='#2c3e50', radius=4, class_='focus-point')
            renderer.draw_text(label, point(x - 5, cy + offset), color='#2c3e50', class_='text-label')

    def draw(self, renderer):
        self._draw_static(renderer)

        image, rays = trace_principal_rays(self.lens, self.u, self.object_height,
                                           renderer.width - self.center_x)

        renderer.draw_object_arrow(self.to_canvas(point(-self.u, 0)), self.object_height, OBJECT_COLOR)

        if not image.at_infinity and abs(image.v) <= LENS_MAX_IMAGE_DISTANCE:
            renderer.draw_object_arrow(self.to_canvas(point(image.v, 0)), self.object_height * image.m,
                                       IMAGE_COLOR, opacity=0.7)

        for ray in rays:
            renderer.draw_ray_segment(ray.transformed(self.to_canvas), color=RAY_COLOR, stroke_width=2)


class ConvexLensDemo(LensDemo):
    """Converging lens: real inverted images beyond F, virtual upright inside F."""

    slug = 'convex-lens'
    title = '凸透镜成像'

    def _next_u(self):
        next_u = self.u - self.animation_speed
        # Jump over the focal point where the image runs off to infinity
        if abs(next_u - self.focal_length) < 1:
            next_u = self.focal_length - 1.5
        return next_u


class ConcaveLensDemo(LensDemo):
    """Diverging lens: always an upright, reduced, virtual image."""

    slug = 'concave-lens'
    title = '凹透镜成像'
    focal_length = -100
