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

import logging

logger = logging.getLogger(__name__)


class Simulator:
    """
    Headless animation driver.

    In the browser each demo advances once per animation frame. This class
    plays the same loop without a display: it starts the demo and keeps
    stepping it until the demo stops by itself or a frame limit is hit,
    recording a snapshot after every frame.

    Attributes:
        demo (Demo): The demo being driven
        max_frames (int): Maximum number of frames to prevent endless runs
        frame_count (int): Number of frames processed so far
        frames (list): Snapshot dicts, one per processed frame
    """

    def __init__(self, demo, max_frames=10000):
        """
        Initialize the simulator.

        Args:
            demo (Demo): The demo to drive
            max_frames (int): Maximum frames to process (default: 10000)
        """
        self.demo = demo
        self.max_frames = max_frames
        self.frame_count = 0
        self.frames = []

    def run(self, on_frame=None):
        """
        Run the animation to completion.

        Args:
            on_frame (callable or None): Called with the demo after each frame

        Returns:
            list: Snapshot dicts, starting with the state before the first frame
        """
        self.frame_count = 0
        self.frames = [self.demo.snapshot()]
        self.demo.warning = None

        self.demo.play()
        while self.demo.is_running and self.frame_count < self.max_frames:
            self.demo.step()
            self.frame_count += 1
            self.frames.append(self.demo.snapshot())
            if on_frame is not None:
                on_frame(self.demo)

        if self.demo.is_running:
            self.demo.pause()
            self.demo.warning = f"Simulation stopped: maximum frame count ({self.max_frames}) reached"
            logger.warning("%s: %s", self.demo.slug, self.demo.warning)
        else:
            logger.debug("%s finished after %d frames", self.demo.slug, self.frame_count)

        return self.frames

    def render_frames(self, every=1):
        """
        Run the animation and render sampled frames.

        Args:
            every (int): Keep one frame out of `every` (the last frame is
                         always kept)

        Returns:
            list: SVG strings
        """
        if every < 1:
            raise ValueError("every must be >= 1")

        images = [self.demo.render()]

        def capture(demo):
            last = not demo.is_running or self.frame_count >= self.max_frames
            if self.frame_count % every == 0 or last:
                images.append(demo.render())

        self.run(on_frame=capture)
        return images
