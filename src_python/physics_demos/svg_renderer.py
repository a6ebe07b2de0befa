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

import svgwrite

from .constants import CANVAS_HEIGHT, CANVAS_WIDTH
from .geometry import is_finite_point


class SVGRenderer:
    """
    SVG renderer for the physics demos.

    The SVG is organized into three layers, bottom to top:
    - objects: Static scenery and bodies (axis, lens, water, plank, ball)
    - rays: Light rays and force vectors
    - labels: Text annotations (above everything)

    Elements carry CSS classes so the site stylesheet of each demo can
    restyle them.

    Attributes:
        width (int): Canvas width in pixels
        height (int): Canvas height in pixels
        viewbox (tuple): SVG viewBox (min_x, min_y, width, height)
        dwg (svgwrite.Drawing): The SVG drawing object
        layer_objects (svgwrite.container.Group): Group for object elements
        layer_rays (svgwrite.container.Group): Group for ray and vector elements
        layer_labels (svgwrite.container.Group): Group for label elements
    """

    def __init__(self, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, viewbox=None, background='white'):
        """
        Initialize the SVG renderer.

        Args:
            width (int): Canvas width in pixels (default: 800)
            height (int): Canvas height in pixels (default: 500)
            viewbox (tuple or None): SVG viewBox as (min_x, min_y, width, height)
                                    If None, uses (0, 0, width, height)
            background (str or None): Background fill, None for transparent
        """
        self.width = width
        self.height = height
        self.viewbox = viewbox if viewbox is not None else (0, 0, width, height)

        # debug=False skips svgwrite's attribute validation so CSS classes
        # and presentation attributes pass through unchanged
        self.dwg = svgwrite.Drawing(size=(f'{width}px', f'{height}px'), profile='full', debug=False)
        self.dwg.viewbox(*self.viewbox)

        if background:
            self.dwg.add(self.dwg.rect(
                insert=(self.viewbox[0], self.viewbox[1]),
                size=(self.viewbox[2], self.viewbox[3]),
                fill=background
            ))

        self.layer_objects = self.dwg.add(self.dwg.g(id='objects'))
        self.layer_rays = self.dwg.add(self.dwg.g(id='rays'))
        self.layer_labels = self.dwg.add(self.dwg.g(id='labels'))

    def group(self, layer=None, **extra):
        """Create a group inside a layer (default: objects) and return it."""
        parent = layer if layer is not None else self.layer_objects
        return parent.add(self.dwg.g(**extra))

    def draw_ray_segment(self, ray, color='red', opacity=1.0, stroke_width=2, class_=None):
        """
        Draw a ray segment.

        Virtual rays (backward extensions) are drawn thin and dashed.

        Args:
            ray (Ray): The ray segment to draw, in canvas coordinates
            color (str): CSS color string (default: 'red')
            opacity (float): Opacity 0.0-1.0 (default: 1.0)
            stroke_width (float): Line width in pixels (default: 2)
            class_ (str or None): CSS class for the line
        """
        p1 = ray.p1
        p2 = ray.p2

        # Skip rays with invalid coordinates
        if not (is_finite_point(p1) and is_finite_point(p2)):
            return None

        extra = {}
        if ray.virtual:
            stroke_width = max(1, stroke_width / 2)
            extra['stroke_dasharray'] = '4,4'
        if class_ is None and ray.role:
            class_ = f'ray-{ray.role}'
        if class_:
            extra['class_'] = class_

        line = self.dwg.line(
            start=(p1['x'], p1['y']),
            end=(p2['x'], p2['y']),
            stroke=color,
            stroke_width=stroke_width,
            stroke_opacity=opacity,
            fill='none',
            **extra
        )
        self.layer_rays.add(line)
        return line

    def draw_point(self, point, color='black', radius=3, label=None, label_offset=(2, -2), class_=None):
        """
        Draw a point (circle).

        Args:
            point (dict): Point with 'x' and 'y' keys
            color (str): Fill color (default: 'black')
            radius (float): Circle radius in pixels (default: 3)
            label (str or None): Optional text label to show near point
            label_offset (tuple): Label offset from the point
            class_ (str or None): CSS class for the circle
        """
        extra = {'class_': class_} if class_ else {}
        circle = self.dwg.circle(
            center=(point['x'], point['y']),
            r=radius,
            fill=color,
            **extra
        )
        self.layer_objects.add(circle)

        if label:
            self.draw_text(label, {'x': point['x'] + label_offset[0], 'y': point['y'] + label_offset[1]},
                           color=color)
        return circle

    def draw_line_segment(self, p1, p2, color='gray', stroke_width=2, label=None, layer=None, **extra):
        """
        Draw a line segment (axis, boundary, normal, ground).

        Args:
            p1 (dict): Start point with 'x' and 'y' keys
            p2 (dict): End point with 'x' and 'y' keys
            color (str): Stroke color (default: 'gray')
            stroke_width (float): Line width in pixels (default: 2)
            label (str or None): Optional text label at the midpoint
            layer: Target group (default: objects layer)
            **extra: Extra SVG attributes (e.g. stroke_dasharray, class_)
        """
        line = self.dwg.line(
            start=(p1['x'], p1['y']),
            end=(p2['x'], p2['y']),
            stroke=color,
            stroke_width=stroke_width,
            **extra
        )
        (layer if layer is not None else self.layer_objects).add(line)

        if label:
            mid = {'x': (p1['x'] + p2['x']) / 2, 'y': (p1['y'] + p2['y']) / 2 - 5}
            self.draw_text(label, mid, color=color, text_anchor='middle')
        return line

    def draw_path(self, d, layer=None, **attrs):
        path = self.dwg.path(d=d, **attrs)
        (layer if layer is not None else self.layer_rays).add(path)
        return path

    def draw_lens(self, center, height, width, focal_length, color='#3498db'):
        """
        Draw a lens outline with a dashed vertical bisector.

        Converging lenses are drawn as an ellipse, diverging lenses as a
        waisted shape whose faces curve inward.

        Args:
            center (dict): Optical centre on the canvas
            height (float): Lens aperture height
            width (float): Lens thickness at the rim
            focal_length (float): Sign selects the shape (positive=converging)
            color (str): Outline color
        """
        cx, cy = center['x'], center['y']
        half_w, half_h = width / 2, height / 2

        if focal_length > 0:
            shape = self.dwg.ellipse(center=(cx, cy), r=(half_w, half_h), class_='lens-shape',
                                     fill=color, fill_opacity=0.3, stroke=color, stroke_width=2)
        else:
            d = (f"M{cx - half_w},{cy - half_h} L{cx + half_w},{cy - half_h} "
                 f"Q{cx + 5},{cy} {cx + half_w},{cy + half_h} "
                 f"L{cx - half_w},{cy + half_h} "
                 f"Q{cx - 5},{cy} {cx - half_w},{cy - half_h} Z")
            shape = self.dwg.path(d=d, class_='lens-shape', fill=color, fill_opacity=0.3,
                                  stroke=color, stroke_width=2)
        self.layer_objects.add(shape)

        self.draw_line_segment(
            {'x': cx, 'y': cy - half_h}, {'x': cx, 'y': cy + half_h},
            color=color, stroke_width=1, stroke_dasharray='2,2', opacity=0.5
        )
        return shape

    def draw_object_arrow(self, base, length, color, stroke_width=4, head=15, opacity=1.0):
        """
        Draw a vertical arrow standing on `base` (object or image).

        Args:
            base (dict): Foot of the arrow on the canvas
            length (float): Signed length; positive points up
            color (str): Arrow color
            stroke_width (float): Shaft width
            head (float): Head length at unit scale
            opacity (float): Group opacity

        Returns:
            svgwrite.container.Group: The arrow group
        """
        g = self.group(opacity=opacity)
        sign = 1 if length >= 0 else -1
        scale = abs(length) / 60 if length else 0
        tip_y = base['y'] - length
        head_len = head * scale
        half_head = 5 * max(scale, 0.2)
        g.add(self.dwg.line(start=(base['x'], base['y']), end=(base['x'], tip_y),
                            stroke=color, stroke_width=stroke_width))
        g.add(self.dwg.polygon(points=[
            (base['x'] - half_head, tip_y),
            (base['x'] + half_head, tip_y),
            (base['x'], tip_y - sign * head_len),
        ], fill=color))
        return g

    def draw_vector(self, origin, dx, dy, color, label=None, stroke_width=3, min_length=0,
                    label_offset=None, opacity=1.0, layer=None):
        """
        Draw a force vector as a shaft with a triangular head.

        Vectors shorter than `min_length` are not drawn.

        Args:
            origin (dict): Tail point
            dx (float): X component in canvas units
            dy (float): Y component in canvas units (positive is down)
            color (str): Vector color
            label (str or None): Text placed beyond the tip
            stroke_width (float): Shaft width
            min_length (float): Hide threshold
            label_offset (float or None): Distance of the label past the tip
            opacity (float): Stroke and fill opacity
            layer: Target group (default: rays layer)

        Returns:
            svgwrite.container.Group or None
        """
        length = math.hypot(dx, dy)
        if length < max(min_length, 1e-9):
            return None

        ux, uy = dx / length, dy / length
        px, py = -uy, ux
        tip = (origin['x'] + dx, origin['y'] + dy)
        head = 10

        parent = layer if layer is not None else self.layer_rays
        g = parent.add(self.dwg.g(class_='vector', opacity=opacity))
        g.add(self.dwg.line(start=(origin['x'], origin['y']), end=tip,
                            stroke=color, stroke_width=stroke_width))
        g.add(self.dwg.polygon(points=[
            (tip[0] + px * 5, tip[1] + py * 5),
            (tip[0] - px * 5, tip[1] - py * 5),
            (tip[0] + ux * head, tip[1] + uy * head),
        ], fill=color))

        if label:
            offset = label_offset if label_offset is not None else head + 10
            g.add(self.dwg.text(
                label,
                insert=(tip[0] + ux * offset, tip[1] + uy * offset),
                fill=color,
                font_size='14px',
                font_weight='bold',
                font_family='sans-serif',
                text_anchor='middle',
                dominant_baseline='middle'
            ))
        return g

    def draw_text(self, text, position, color='black', font_size='12px', layer=None, **extra):
        label = self.dwg.text(
            text,
            insert=(position['x'], position['y']),
            fill=color,
            font_size=font_size,
            font_family='sans-serif',
            **extra
        )
        (layer if layer is not None else self.layer_labels).add(label)
        return label

    def save(self, filename):
        """
        Save the SVG to a file.

        Args:
            filename (str): Output filename (e.g., 'output.svg')
        """
        self.dwg.saveas(filename)

    def to_string(self):
        """
        Get the SVG as a string.

        Returns:
            str: SVG content as XML string
        """
        return self.dwg.tostring()
