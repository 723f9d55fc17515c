"""Tests for arc-length path interpolation."""

import numpy as np
import pytest

from waypath.errors import InvalidParametersError
from waypath.path import (
    PathSampler,
    PathType,
    PathwayType,
    as_waypoints,
    build_arc_length_table,
    catmull_rom,
    path_style_progress,
    resolve,
    sample_path,
)


def assert_vec3_approx(v, expected: tuple, eps: float = 1e-6):
    """Assert vector is approximately equal to expected tuple."""
    assert abs(v[0] - expected[0]) < eps, f"x: {v[0]} != {expected[0]}"
    assert abs(v[1] - expected[1]) < eps, f"y: {v[1]} != {expected[1]}"
    assert abs(v[2] - expected[2]) < eps, f"z: {v[2]} != {expected[2]}"


ZIGZAG = as_waypoints([(0, 0, 0), (4, 0, 0), (4, 3, 0), (8, 3, 2), (8, -2, 2)])


class TestWaypoints:
    """Waypoint validation."""

    def test_copies_into_float_array(self):
        source = [(1, 2, 3), (4, 5, 6)]
        points = as_waypoints(source)
        assert points.dtype == np.float64
        assert points.shape == (2, 3)

    def test_empty_rejected(self):
        with pytest.raises(InvalidParametersError):
            as_waypoints([])

    def test_wrong_dimension_rejected(self):
        with pytest.raises(InvalidParametersError):
            as_waypoints([(0, 0), (1, 1)])

    def test_ragged_rejected(self):
        with pytest.raises(InvalidParametersError):
            as_waypoints([(0, 0, 0), (1, 1)])

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidParametersError):
            as_waypoints([(0, 0, 0), (float("nan"), 0, 0)])


class TestArcLengthTable:
    """Arc-length table construction."""

    def test_line_table_uses_waypoints(self):
        """LINE table holds cumulative distances between waypoints."""
        points = as_waypoints([(0, 0, 0), (3, 4, 0), (3, 4, 12)])
        table = build_arc_length_table(points, PathwayType.LINE, segment=10)
        assert table.tolist() == pytest.approx([0.0, 5.0, 17.0])

    def test_curve_table_length(self):
        """CURVE table has (N - 1) * segment + 1 entries."""
        for segment in (1, 2, 7, 10):
            table = build_arc_length_table(ZIGZAG, PathwayType.CURVE, segment)
            assert len(table) == (len(ZIGZAG) - 1) * segment + 1

    def test_tables_non_decreasing(self):
        for pathway_type in (PathwayType.LINE, PathwayType.CURVE):
            for segment in (1, 3, 16):
                table = build_arc_length_table(ZIGZAG, pathway_type, segment)
                assert table[0] == 0.0
                assert np.all(np.diff(table) >= 0.0)

    def test_curve_passes_through_waypoints(self):
        """Sample k * segment of a curve is waypoint k."""
        segment = 6
        samples = sample_path(ZIGZAG, PathwayType.CURVE, segment)
        for k, point in enumerate(ZIGZAG):
            assert_vec3_approx(samples[k * segment], tuple(point))

    def test_curve_not_shorter_than_chords(self):
        """A curve through the waypoints is at least as long as the polyline."""
        line = build_arc_length_table(ZIGZAG, PathwayType.LINE)
        curve = build_arc_length_table(ZIGZAG, PathwayType.CURVE, 20)
        assert curve[-1] >= line[-1] - 1e-9

    def test_coincident_points_give_zero_table(self):
        points = as_waypoints([(1, 1, 1)] * 4)
        for pathway_type in (PathwayType.LINE, PathwayType.CURVE):
            table = build_arc_length_table(points, pathway_type, 5)
            assert np.all(table == 0.0)

    def test_single_point_table(self):
        points = as_waypoints([(3, 3, 3)])
        assert build_arc_length_table(points, PathwayType.CURVE, 10).tolist() == [0.0]
        assert build_arc_length_table(points, PathwayType.LINE).tolist() == [0.0]

    def test_curve_rejects_zero_segment(self):
        with pytest.raises(InvalidParametersError):
            build_arc_length_table(ZIGZAG, PathwayType.CURVE, 0)

    def test_line_ignores_segment(self):
        table = build_arc_length_table(ZIGZAG, PathwayType.LINE, 0)
        assert len(table) == len(ZIGZAG)


class TestResolveEndpoints:
    """Progress 0 and 1 land on the path ends."""

    @pytest.mark.parametrize("pathway_type", [PathwayType.LINE, PathwayType.CURVE])
    def test_start_and_end(self, pathway_type):
        sampler = PathSampler(ZIGZAG, pathway_type, segment=8)
        assert_vec3_approx(sampler.sample(0.0).position, tuple(ZIGZAG[0]))
        assert_vec3_approx(sampler.sample(1.0).position, tuple(ZIGZAG[-1]))

    def test_progress_outside_range_is_clamped(self):
        sampler = PathSampler(ZIGZAG, PathwayType.LINE)
        assert_vec3_approx(sampler.sample(-0.5).position, tuple(ZIGZAG[0]))
        assert_vec3_approx(sampler.sample(1.5).position, tuple(ZIGZAG[-1]))

    def test_no_forward_at_start(self):
        sampler = PathSampler(ZIGZAG, PathwayType.LINE)
        assert sampler.sample(0.0).forward is None

    def test_forward_at_end_follows_last_span(self):
        sampler = PathSampler(ZIGZAG, PathwayType.LINE)
        assert_vec3_approx(sampler.sample(1.0).forward, (0, -1, 0))


class TestResolveLine:
    """Piecewise-linear interpolation."""

    def test_midpoint(self):
        points = as_waypoints([(0, 0, 0), (10, 0, 0)])
        sample = PathSampler(points, PathwayType.LINE).sample(0.25)
        assert_vec3_approx(sample.position, (2.5, 0, 0))
        assert_vec3_approx(sample.forward, (1, 0, 0))

    def test_progress_follows_distance_not_waypoint_index(self):
        """Half of a 1 + 9 long path is 4 units into the second span."""
        points = as_waypoints([(0, 0, 0), (1, 0, 0), (1, 9, 0)])
        sample = PathSampler(points, PathwayType.LINE).sample(0.5)
        assert_vec3_approx(sample.position, (1, 4, 0))
        assert_vec3_approx(sample.forward, (0, 1, 0))
        assert sample.index == 1

    def test_zero_length_span_is_skipped(self):
        points = as_waypoints([(0, 0, 0), (0, 0, 0), (10, 0, 0)])
        sample = PathSampler(points, PathwayType.LINE).sample(0.5)
        assert_vec3_approx(sample.position, (5, 0, 0))
        assert_vec3_approx(sample.forward, (1, 0, 0))

    def test_forward_is_unit_length(self):
        sampler = PathSampler(ZIGZAG, PathwayType.LINE)
        for progress in np.linspace(0.05, 1.0, 20):
            forward = sampler.sample(float(progress)).forward
            assert forward is not None
            assert np.linalg.norm(forward) == pytest.approx(1.0)


class TestResolveCurve:
    """Catmull-Rom interpolation."""

    def test_symmetric_path_midpoint(self):
        """Middle of a symmetric curve is its middle waypoint."""
        points = as_waypoints([(0, 0, 0), (5, 5, 0), (10, 0, 0)])
        sample = PathSampler(points, PathwayType.CURVE, segment=10).sample(0.5)
        assert_vec3_approx(sample.position, (5, 5, 0), eps=1e-6)

    def test_collinear_points_stay_on_line(self):
        points = as_waypoints([(0, 0, 0), (2, 0, 0), (4, 0, 0), (6, 0, 0)])
        sampler = PathSampler(points, PathwayType.CURVE, segment=5)
        for progress in np.linspace(0.0, 1.0, 11):
            position = sampler.sample(float(progress)).position
            assert position[1] == pytest.approx(0.0)
            assert position[2] == pytest.approx(0.0)

    def test_positions_advance_along_path(self):
        """Progress is monotonic in arc length."""
        sampler = PathSampler(ZIGZAG, PathwayType.CURVE, segment=10)
        total = sampler.total_length
        previous = 0.0
        for progress in np.linspace(0.0, 1.0, 41):
            sample = sampler.sample(float(progress))
            i = sample.index
            lower = sampler.table[i]
            travelled = lower + np.linalg.norm(sample.position - sampler.samples[i])
            assert travelled == pytest.approx(progress * total, abs=1e-9)
            assert travelled >= previous - 1e-9
            previous = travelled

    def test_catmull_rom_endpoints(self):
        p0, p1, p2, p3 = (np.array(v, dtype=float) for v in [(0, 0, 0), (1, 0, 0), (2, 1, 0), (3, 1, 0)])
        assert_vec3_approx(catmull_rom(p0, p1, p2, p3, 0.0), (1, 0, 0))
        assert_vec3_approx(catmull_rom(p0, p1, p2, p3, 1.0), (2, 1, 0))


class TestDegeneratePaths:
    """Single point and coincident points."""

    @pytest.mark.parametrize("pathway_type", [PathwayType.LINE, PathwayType.CURVE])
    def test_single_point_holds_position(self, pathway_type):
        points = as_waypoints([(3, 3, 3)])
        sampler = PathSampler(points, pathway_type, segment=10)
        for progress in (0.0, 0.3, 1.0):
            sample = sampler.sample(progress)
            assert_vec3_approx(sample.position, (3, 3, 3))
            assert sample.forward is None

    def test_coincident_points_return_first(self):
        points = as_waypoints([(2, 2, 2), (2, 2, 2), (2, 2, 2)])
        sample = PathSampler(points, PathwayType.CURVE, segment=4).sample(0.5)
        assert_vec3_approx(sample.position, (2, 2, 2))
        assert sample.forward is None


class TestCursor:
    """Cursor hint only speeds up lookup."""

    def test_cursor_matches_binary_search(self):
        samples = sample_path(ZIGZAG, PathwayType.CURVE, 10)
        table = build_arc_length_table(ZIGZAG, PathwayType.CURVE, 10)
        cursor = 0
        for progress in np.linspace(0.0, 1.0, 57):
            hinted = resolve(float(progress), table, samples, cursor)
            plain = resolve(float(progress), table, samples)
            assert_vec3_approx(hinted.position, tuple(plain.position))
            assert hinted.index == plain.index
            if plain.forward is None:
                assert hinted.forward is None
            else:
                assert_vec3_approx(hinted.forward, tuple(plain.forward))
            cursor = hinted.index

    def test_cursor_on_waypoint_boundary(self):
        """Progress landing exactly on a waypoint picks the same span with or without a hint."""
        points = as_waypoints([(0, 0, 0), (5, 0, 0), (5, 12, 0)])
        samples = sample_path(points, PathwayType.LINE)
        table = build_arc_length_table(points, PathwayType.LINE)
        progress = 5.0 / 17.0
        assert progress * table[-1] == table[1]

        hinted = resolve(progress, table, samples, cursor=0)
        plain = resolve(progress, table, samples)

        assert hinted.index == plain.index == 1
        assert_vec3_approx(hinted.forward, (0, 1, 0))
        assert_vec3_approx(plain.forward, (0, 1, 0))
        assert_vec3_approx(hinted.position, (5, 0, 0))

    def test_stale_cursor_after_wrap(self):
        """A cursor past the target falls back to a full search."""
        sampler = PathSampler(ZIGZAG, PathwayType.LINE)
        sampler.sample(0.95)
        assert sampler.cursor == len(ZIGZAG) - 2
        sample = sampler.sample(0.05)
        assert sample.index == 0
        assert sampler.cursor == 0


class TestPathStyle:
    def test_normal_is_identity(self):
        for t in (0.0, 0.25, 0.5, 1.0):
            assert path_style_progress(PathType.NORMAL, t) == t
