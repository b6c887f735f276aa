import math

import pytest

import keyholegen as gen

CASES = [
    (100, 150, 8, 2),
    (20, 20, 8, 2),
    (297, 210, 10.5, 3.2),
    (60, 40, 4, 1.5),
]


def _hole_frame(r):
    g = r.geometry
    m = r.tolerances.doc_margin
    cx = g.frame_width_with_extra / 2 + m
    top = g.hole_to_top_distance + m
    return g, cx, top


def test_deterministic():
    a = gen.compute(100, 150, 8, 2)
    b = gen.compute(100, 150, 8, 2)
    assert a == b
    assert a.cut_path.to_svg_d() == b.cut_path.to_svg_d()
    assert a.shelf_path.to_svg_d() == b.shelf_path.to_svg_d()


@pytest.mark.parametrize("args", CASES)
def test_paths_closed(args):
    r = gen.compute(*args)
    for path in (r.cut_path, r.shelf_path):
        assert isinstance(path.segments[0], gen.MoveTo)
        assert isinstance(path.segments[-1], gen.Close)
        assert path.is_closed()

    # The cut contour is closed by its last arc, not by the Z line.
    end = r.cut_path.segments[-2]
    assert (end.x, end.y) == pytest.approx(r.cut_path.start, abs=1e-9)


def test_segment_sequence_shape():
    r = gen.compute(100, 150, 8, 2)
    assert [s.kind for s in r.cut_path.segments] == list("MALALAAZ")
    assert [s.kind for s in r.shelf_path.segments] == list("MALLALALALLZ")


def test_start_points():
    r = gen.compute(100, 150, 8, 2)
    # cx = 101 / 2 + 10, hole top at 15.5 + 10
    assert r.cut_path.start == pytest.approx((65.0, 39.0))
    assert r.shelf_path.start == pytest.approx((56.0, 30.0))


@pytest.mark.parametrize("args", CASES)
def test_contours_stay_within_hole_envelope(args):
    r = gen.compute(*args)
    g, cx, top = _hole_frame(r)
    eps = 1e-6
    for path in (r.cut_path, r.shelf_path):
        pts = path.flatten()
        assert abs(gen.polygon_area(pts)) > 0
        for x, y in pts:
            assert cx - g.hole_width / 2 - eps <= x <= cx + g.hole_width / 2 + eps
            assert top - eps <= y <= top + g.hole_height + eps


@pytest.mark.parametrize("args", CASES)
def test_engraved_shoulder_lies_inside_cut(args):
    r = gen.compute(*args)
    g, cx, top = _hole_frame(r)
    b = r.tolerances.engrave_bleed
    cy = top + g.hole_height - g.hole_width / 2

    pen = gen.PathBuilder(cx + g.hole_width / 2 - b, cy)
    gen.interior_curve(
        pen,
        hole_radius=g.hole_width / 2 - b,
        slot_radius=g.slot_width / 2 - b,
        cusp=g.cusp_height_engrave,
        rise=g.hole_height - g.hole_width,
    )
    shoulder = pen.close().flatten()
    cut = r.cut_path.flatten(steps_per_arc=64)
    for p in shoulder:
        assert gen.point_in_polygon(p, cut)


def test_engraved_shoulder_is_concentric_with_cut():
    r = gen.compute(100, 150, 8, 2)
    g, cx, top = _hole_frame(r)
    cy = top + g.hole_height - g.hole_width / 2
    shoulder_arc = r.shelf_path.segments[4]
    assert isinstance(shoulder_arc, gen.ArcTo)
    p0 = r.shelf_path.points()[3]
    for x, y in gen.arc_polyline(p0, shoulder_arc):
        assert math.hypot(x - cx, y - cy) == pytest.approx(g.hole_width / 2 - 0.5)


def test_mouth_arc_shared_with_hole_top():
    r = gen.compute(100, 150, 8, 2)
    ys = [y for _, y in r.shelf_path.flatten()]
    assert min(ys) == pytest.approx(25.5)
    cut_ys = [y for _, y in r.cut_path.flatten()]
    # slot top: hole center line minus slot radius
    assert min(cut_ys) == pytest.approx(25.5 + 4.5 - 1.1)
    assert max(cut_ys) == pytest.approx(25.5 + 18.0)


def test_shelf_returns_up_left_wall_before_close():
    r = gen.compute(100, 150, 8, 2)
    # step back out of the bled slot lands on the left wall at the hole center line
    wall_foot = r.shelf_path.segments[-3]
    assert (wall_foot.x, wall_foot.y) == pytest.approx((56.0, 39.0))
    last = r.shelf_path.segments[-2]
    assert isinstance(last, gen.LineTo)
    assert (last.x, last.y) == pytest.approx(r.shelf_path.start, abs=1e-9)


def test_path_ending_away_from_start_is_not_closed():
    stray = gen.Path((gen.MoveTo(0.0, 0.0), gen.LineTo(5.0, 0.0), gen.LineTo(5.0, 5.0), gen.Close()))
    assert not stray.is_closed()
    r = gen.compute(100, 150, 8, 2)
    broken = gen.Path(r.shelf_path.segments[:-2] + (gen.LineTo(0.0, 0.0), gen.Close()))
    assert not broken.is_closed()
    assert not gen.Path((gen.MoveTo(1.0, 1.0), gen.Close())).is_closed()
