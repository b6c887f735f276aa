import math

import pytest

import keyholegen as gen


def test_scenario_standard_frame():
    # hole = head + 2 * 0.5, slot = shank + 2 * 0.1
    r = gen.compute(frame_width=100, frame_height=150, nail_head_diameter=8, nail_shank_diameter=2)
    g = r.geometry

    assert g.hole_width == pytest.approx(9.0)
    assert g.hole_height == pytest.approx(18.0)
    assert g.slot_width == pytest.approx(2.2)
    assert g.hole_to_top_distance == pytest.approx(15.5)
    assert g.cusp_height_cut == pytest.approx(4.364, abs=1e-3)
    assert g.cusp_height_engrave == pytest.approx(math.sqrt(4.0 ** 2 - 0.6 ** 2))
    assert not g.centered

    assert r.canvas_size == pytest.approx((121.0, 171.0))
    assert r.outline_rect == gen.Rect(10.0, 10.0, 101.0, 151.0)


def test_scenario_small_piece_is_centered():
    g = gen.compute(20, 20, 8, 2).geometry
    assert g.frame_height_with_extra == pytest.approx(21.0)
    assert g.hole_height == pytest.approx(18.0)
    assert g.hole_to_top_distance == pytest.approx(1.5)
    assert g.centered


def test_hole_to_top_pinned_on_tall_frames():
    for h in (48, 60, 150, 1000):
        assert gen.compute(100, h, 8, 2).geometry.hole_to_top_distance == pytest.approx(15.5)


def test_hole_to_top_strictly_decreases_once_centering_kicks_in():
    heights = [47, 40, 33.3, 25, 20, 17.5]
    dists = [gen.compute(100, h, 8, 2).geometry.hole_to_top_distance for h in heights]
    for a, b in zip(dists, dists[1:]):
        assert b < a
    for h, d in zip(heights, dists):
        assert d == pytest.approx((h + 1.0 - 18.0) / 2)


def test_custom_tolerances_flow_through():
    tol = gen.Tolerances(head_clearance=1.0, shank_clearance=0.0, extra_frame_size=0.0, doc_margin=5.0)
    r = gen.compute(50, 50, 8, 2, tolerances=tol)
    g = r.geometry
    assert g.hole_width == pytest.approx(10.0)
    assert g.slot_width == pytest.approx(2.0)
    assert g.frame_width_with_extra == pytest.approx(50.0)
    assert r.canvas_size == pytest.approx((60.0, 60.0))
    assert r.outline_rect.x == pytest.approx(5.0)


def test_zero_bleed_makes_engrave_shoulder_match_cut():
    g = gen.compute(100, 150, 8, 2, tolerances=gen.Tolerances(engrave_bleed=0.0)).geometry
    assert g.cusp_height_engrave == pytest.approx(g.cusp_height_cut)


def test_tolerances_reject_negative_and_non_finite():
    with pytest.raises(ValueError):
        gen.Tolerances(engrave_bleed=-0.1)
    with pytest.raises(ValueError):
        gen.Tolerances(doc_margin=float("inf"))


def test_fit_warnings():
    assert gen.fit_warnings(gen.compute(100, 150, 8, 2).geometry) == []

    warnings = gen.fit_warnings(gen.compute(5, 10, 8, 2).geometry)
    assert any("taller" in w for w in warnings)
    assert any("wider" in w for w in warnings)
    assert any("above the top edge" in w for w in warnings)
