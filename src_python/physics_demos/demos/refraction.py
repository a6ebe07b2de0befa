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

from ..geometry import arc_path, point, polar_offset, to_deg, to_rad
from ..optics.refraction import Interface
from .base import Demo

RAY_COLORS = {
    'incident': '#e67e22',
    'reflected': '#9b59b6',
    'transmitted': '#27ae60',
}


class RefractionDemo(Demo):
    """
    Light crossing from air into water.

    Shows the incident, reflected and refracted rays with their angles and
    the Fresnel split of intensity. Reflected and refracted rays get wider
    and more opaque the more light they carry. Playing the animation sweeps
    the angle of incidence down to normal incidence.
    """

    slug = 'air-water-refraction'
    title = '光从空气射入水中的折射'
    center_x = 400
    center_y = 250
    axis_length = 700
    ray_length = 500
    arc_radius = 60
    animation_speed = 0.25
    initial_angle = 45
    restart_angle = 60
    parameters = {'angle': (0, 89.9)}

    def __init__(self, n1=1.0, n2=1.33, **params):
        self.interface = Interface(n1, n2)
        self.angle = self.initial_angle
        super().__init__(**params)

    def result(self):
        return self.interface.trace(to_rad(self.angle), self.ray_length)

    def to_canvas(self, p):
        return {'x': self.center_x + p['x'], 'y': self.center_y - p['y']}

    def _apply_parameter(self, name, value):
        self.angle = value

    def _reset_state(self):
        self.angle = self.initial_angle

    def _before_play(self):
        if self.angle <= 0.1:
            self.angle = self.restart_angle

    def _advance(self):
        self.angle -= self.animation_speed
        if self.angle <= 0:
            self.angle = 0.0
            return False
        return True

    def readout(self):
        result = self.result()
        theta_t = '全反射' if result.total_internal_reflection else f'{to_deg(result.theta_t):.1f}°'
        return {
            'n1': f'{self.interface.n1:.2f}',
            'n2': f'{self.interface.n2:.2f}',
            'theta_i': f'{self.angle:.1f}°',
            'theta_r': f'{self.angle:.1f}°',
            'theta_t': theta_t,
            'R': f'{result.reflectance:.2f}',
            'T': f'{result.transmittance:.2f}',
        }

    def draw(self, renderer):
        cx, cy = self.center_x, self.center_y
        center = point(cx, cy)
        half_axis = self.axis_length / 2

        renderer.layer_objects.add(renderer.dwg.rect(
            insert=(cx - half_axis, cy), size=(self.axis_length, renderer.height - cy),
            fill='#3498db', fill_opacity=0.15, class_='water'
        ))
        renderer.draw_line_segment(point(cx - half_axis, cy), point(cx + half_axis, cy),
                                   color='#2c3e50', stroke_width=2, class_='boundary')
        renderer.draw_line_segment(point(cx, cy - 200), point(cx, cy + 200),
                                   color='#95a5a6', stroke_width=1, stroke_dasharray='6,4', class_='normal')
        renderer.draw_text(f'空气 n₁={self.interface.n1:.2f}', point(cx - 300, cy - 20),
                           font_size='16px', class_='medium-label')
        renderer.draw_text(f'水 n₂={self.interface.n2:.2f}', point(cx - 300, cy + 40),
                           font_size='16px', class_='medium-label')

        result = self.result()
        for ray in result.rays:
            width, opacity = 3, 1.0
            if ray.role != 'incident':
                width = 2 + 8 * ray.brightness
                opacity = 0.6 + 0.4 * ray.brightness
            renderer.draw_ray_segment(ray.transformed(self.to_canvas), color=RAY_COLORS[ray.role],
                                      stroke_width=width, opacity=opacity)

        theta_i = result.theta_i
        r = self.arc_radius
        label_r = r + 18
        # (role, angle, measured below the boundary, sweep flag, side of the normal, label)
        arcs = [
            ('incident', theta_i, False, 0, -1, f'θᵢ {self.angle:.1f}°'),
            ('reflected', theta_i, False, 1, 1, f'θʳ {self.angle:.1f}°'),
        ]
        if result.theta_t is not None:
            arcs.append(('transmitted', result.theta_t, True, 1, 1, f'θᵗ {to_deg(result.theta_t):.1f}°'))

        for role, theta, below, sweep, side, text in arcs:
            start = polar_offset(center, r, 0, below=below)
            end = polar_offset(center, r, side * theta, below=below)
            renderer.draw_path(arc_path(r, start, end, sweep), fill='none', stroke=RAY_COLORS[role],
                               stroke_width=1.5, class_=f'arc-{role[0]}', layer=renderer.layer_objects)
            label = polar_offset(center, label_r, side * theta / 2, below=below)
            renderer.draw_text(text, label, font_size='13px', text_anchor='middle', class_='angle-label')

        if math.isclose(self.angle, 0.0, abs_tol=1e-9):
            renderer.draw_text('垂直入射', point(cx + 10, cy - 210), color='#7f8c8d')
