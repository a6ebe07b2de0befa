"""Unit tests for the demo controllers and the demo registry."""

import pytest

from physics_demos.demos import (
    ConcaveLensDemo,
    ConvexLensDemo,
    FallingBallDemo,
    FrictionInclineDemo,
    RefractionDemo,
    available_demos,
    get_demo,
)
from physics_demos.demos.base import FINISHED, PAUSED, READY, RUNNING, SCRUBBING
from physics_demos.exceptions import InvalidParameterError, UnknownDemoError


def play_out(demo, limit=100000):
    demo.play()
    for _ in range(limit):
        if not demo.step():
            break
    return demo


class TestRegistry:
    def test_available_demos(self):
        assert available_demos() == [
            "air-water-refraction",
            "concave-lens",
            "convex-lens",
            "falling-ball-in-water",
            "friction-inclined-plane",
        ]

    def test_get_demo_applies_parameters(self):
        demo = get_demo("convex-lens", u=150)
        assert isinstance(demo, ConvexLensDemo)
        assert demo.u == 150

    def test_unknown_demo(self):
        with pytest.raises(UnknownDemoError) as excinfo:
            get_demo("pendulum")
        assert "pendulum" in str(excinfo.value)
        assert isinstance(excinfo.value, KeyError)


class TestControls:
    def test_parameter_out_of_range(self):
        with pytest.raises(InvalidParameterError):
            ConvexLensDemo(u=500)

    def test_unknown_parameter(self):
        with pytest.raises(InvalidParameterError, match="no parameter"):
            ConvexLensDemo(angle=10)

    def test_moving_a_slider_pauses_the_animation(self):
        demo = ConvexLensDemo()
        demo.play()
        assert demo.status == RUNNING
        demo.set_parameter("u", 250)
        assert demo.status == PAUSED
        assert not demo.step()

    def test_toggle_pause(self):
        demo = RefractionDemo()
        demo.toggle_pause()
        assert demo.status == READY
        demo.play()
        demo.toggle_pause()
        assert demo.status == PAUSED
        demo.toggle_pause()
        assert demo.status == RUNNING

    def test_reset(self):
        demo = ConvexLensDemo(u=120)
        demo.play()
        demo.step()
        demo.warning = "stale"
        demo.reset()
        assert demo.status == READY
        assert demo.warning is None
        assert demo.u == demo.initial_u

    def test_snapshot_includes_status(self):
        snapshot = ConvexLensDemo().snapshot()
        assert snapshot["status"] == READY
        assert snapshot["u"] == 300


class TestLensDemos:
    def test_convex_readout(self):
        assert ConvexLensDemo(u=300).readout() == {
            "u": 300,
            "v": 150,
            "m": "-0.50",
            "type": "倒立 缩小 实像",
        }

    def test_convex_readout_at_focus(self):
        readout = ConvexLensDemo(u=100).readout()
        assert readout["v"] == "∞"
        assert readout["type"] == "平行光 不成像"

    def test_concave_readout(self):
        readout = ConcaveLensDemo(u=300).readout()
        assert readout["v"] == -75
        assert readout["type"] == "正立 缩小 虚像"

    def test_convex_animation_jumps_over_focus(self):
        demo = ConvexLensDemo(u=101)
        demo.play()
        demo.step()
        assert demo.u == pytest.approx(98.5)

    def test_animation_stops_near_lens_and_restarts(self):
        demo = play_out(ConvexLensDemo(u=40))
        assert demo.status == FINISHED
        assert demo.u > demo.min_u
        demo.play()
        assert demo.u == demo.restart_u

    def test_render(self):
        svg = ConvexLensDemo(u=300).render()
        assert 'class="lens-shape"' in svg
        assert "ray-parallel" in svg
        assert "2F'" in svg

    def test_render_at_focus_and_virtual_image(self):
        assert "<svg" in ConvexLensDemo(u=100).render()
        assert 'stroke-dasharray="4,4"' in ConvexLensDemo(u=50).render()
        assert 'stroke-dasharray="4,4"' in ConcaveLensDemo(u=300).render()

    def test_distant_image_has_no_image_arrow(self):
        assert "#e74c3c" in ConvexLensDemo(u=300).render()
        svg = ConvexLensDemo(u=104).render()
        assert "#e74c3c" not in svg
        assert "ray-parallel" in svg


class TestRefractionDemo:
    def test_readout(self):
        readout = RefractionDemo(angle=45).readout()
        assert readout["theta_i"] == "45.0°"
        assert readout["theta_r"] == "45.0°"
        assert readout["theta_t"] == "32.1°"
        assert float(readout["R"]) + float(readout["T"]) == pytest.approx(1, abs=0.011)

    def test_total_internal_reflection(self):
        demo = RefractionDemo(n1=1.33, n2=1.0, angle=60)
        readout = demo.readout()
        assert readout["theta_t"] == "全反射"
        assert readout["T"] == "0.00"
        assert "ray-transmitted" not in demo.render()

    def test_animation_sweeps_to_normal_incidence(self):
        demo = play_out(RefractionDemo(angle=1))
        assert demo.status == FINISHED
        assert demo.angle == 0
        assert "垂直入射" in demo.render()
        demo.play()
        assert demo.angle == demo.restart_angle

    def test_render_has_all_rays(self):
        svg = RefractionDemo(angle=30).render()
        for role in ("incident", "reflected", "transmitted"):
            assert f"ray-{role}" in svg


class TestFallingBallDemo:
    def test_time_slider_scrubs(self):
        demo = FallingBallDemo()
        demo.set_parameter("time", 0.5)
        assert demo.status == SCRUBBING
        assert demo.frame.t == pytest.approx(0.5, abs=1e-3)

    def test_initial_time_does_not_scrub(self):
        demo = get_demo("falling-ball-in-water", time=0.2)
        assert demo.status == READY
        assert demo.time == pytest.approx(0.2)

    def test_toggle_resumes_after_scrubbing(self):
        demo = FallingBallDemo()
        demo.set_parameter("time", 0.5)
        assert demo.status == SCRUBBING
        demo.toggle_pause()
        assert demo.status == RUNNING
        assert demo.step()
        assert demo.time == pytest.approx(0.5 + demo.frame_time)

    def test_density_change_recomputes(self):
        demo = FallingBallDemo()
        before = demo.simulation
        demo.set_parameter("density", 1500)
        assert demo.simulation is not before
        assert demo.simulation.fluid_density == 1500

    def test_readout(self):
        readout = FallingBallDemo().readout()
        assert set(readout) == {"time", "h", "v", "G", "Fb", "Fd", "N", "Fnet"}
        assert readout["time"] == "0.00"
        assert readout["h"] == "0.75 m"

    def test_playback_runs_to_end_and_restarts(self):
        demo = play_out(FallingBallDemo())
        assert demo.status == FINISHED
        assert demo.time == demo.simulation.end_time
        demo.play()
        assert demo.time == 0

    def test_render(self):
        demo = FallingBallDemo(time=1.0)
        svg = demo.render()
        assert 'class="ball"' in svg
        assert ">N</text>" in svg


class TestFrictionInclineDemo:
    def test_readout_at_rest(self):
        readout = FrictionInclineDemo().readout()
        assert readout["angle"] == "0.0°"
        assert readout["G"] == "98.0 N"
        assert readout["phase"] == "resting"

    def test_mu_slider(self):
        demo = FrictionInclineDemo(mu=0.8)
        assert demo.plane.mu == 0.8

    def test_runs_until_block_reaches_bottom(self):
        demo = play_out(FrictionInclineDemo(mu=0.3))
        assert demo.status == FINISHED
        assert demo.readout()["phase"] == "bottom"
        assert "物体到达底端" in demo.render()
        demo.play()
        assert demo.plane.phase == "resting"

    def test_render(self):
        svg = FrictionInclineDemo().render()
        assert 'class="plank"' in svg
        assert "rotate(0.0)" in svg
