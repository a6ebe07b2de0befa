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

from ..exceptions import InvalidParameterError
from ..svg_renderer import SVGRenderer

READY = 'ready'
RUNNING = 'running'
PAUSED = 'paused'
FINISHED = 'finished'
SCRUBBING = 'scrubbing'


class Demo:
    """
    Base class for an interactive visualization.

    A demo owns its physical state and exposes the controls of the web
    page as methods: parameters (sliders), play, pause, reset, and step()
    for a single animation frame. Drawing goes through an SVGRenderer.

    Subclasses set `slug`, `title`, `parameters` (name -> (min, max)) and
    implement `_apply_parameter`, `_advance`, `readout` and `draw`.

    Attributes:
        status (str): ready, running, paused, finished or scrubbing
        warning (str or None): Set by the simulator when a run is cut short
        error (str or None): Reserved for invalid state reports
    """

    slug = None
    title = None
    width = 800
    height = 500
    parameters = {}

    def __init__(self, **params):
        self.status = READY
        self.warning = None
        self.error = None
        for name, value in params.items():
            self.set_parameter(name, value)
        # Constructor values set the starting state
        self.status = READY

    @property
    def is_running(self):
        return self.status == RUNNING

    def set_parameter(self, name, value):
        """
        Change a slider-controlled parameter.

        Moving a slider stops a running animation.

        Raises:
            InvalidParameterError: Unknown name or value outside its range
        """
        if name not in self.parameters:
            raise InvalidParameterError(
                f"{self.slug} has no parameter {name!r}; expected one of {sorted(self.parameters)}"
            )
        low, high = self.parameters[name]
        value = float(value)
        if not low <= value <= high:
            raise InvalidParameterError(f"{name} must be within [{low}, {high}], got {value}")
        if self.status == RUNNING:
            self.status = PAUSED
        self._apply_parameter(name, value)

    def play(self):
        if self.status != RUNNING:
            self._before_play()
            self.status = RUNNING

    def pause(self):
        if self.status == RUNNING:
            self.status = PAUSED

    def toggle_pause(self):
        """Pause a running animation; resume a paused or scrubbed one."""
        if self.status == RUNNING:
            self.status = PAUSED
        elif self.status == PAUSED:
            self.status = RUNNING
        elif self.status == SCRUBBING:
            self.play()

    def reset(self):
        self.status = READY
        self.warning = None
        self._reset_state()

    def step(self):
        """
        Advance one animation frame if running.

        Returns:
            bool: True while the animation keeps running
        """
        if self.status != RUNNING:
            return False
        if not self._advance():
            self.status = FINISHED
        return self.status == RUNNING

    def snapshot(self):
        """Frame record: display values plus status."""
        data = dict(self.readout())
        data['status'] = self.status
        return data

    def render(self):
        """Render the current state to an SVG string."""
        renderer = SVGRenderer(self.width, self.height)
        self.draw(renderer)
        return renderer.to_string()

    def _before_play(self):
        pass

    def _apply_parameter(self, name, value):
        raise NotImplementedError

    def _reset_state(self):
        raise NotImplementedError

    def _advance(self):
        raise NotImplementedError

    def readout(self):
        raise NotImplementedError

    def draw(self, renderer):
        raise NotImplementedError
