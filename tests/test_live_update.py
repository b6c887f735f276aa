import keyholegen as gen


def _make(values):
    published = []
    update = gen.make_update(lambda: values, published.append)
    return update, published


def _form(**overrides):
    values = {
        "frame_width": "20",
        "frame_height": "20",
        "nail_head_diameter": "8",
        "nail_shank_diameter": "2",
    }
    values.update(overrides)
    return values


def test_valid_inputs_publish_render():
    update, published = _make(_form())
    assert update() is True
    assert len(published) == 1
    out = published[0]
    assert out.filename == "frame_20mm_x_20mm_nail_8mm_x_2mm.svg"
    assert out.svg.startswith("<?xml")
    assert out.data_uri.startswith("data:image/svg+xml;charset=utf-8,")
    assert out.result.geometry.centered


def test_unparseable_field_skips_render():
    for bad in ("", "  ", "abc", None):
        update, published = _make(_form(frame_height=bad))
        assert update() is False
        assert published == []


def test_rejected_dimensions_keep_last_render():
    values = _form()
    update, published = _make(values)
    assert update()

    values["nail_head_diameter"] = "1"  # narrower than the shank
    assert update() is False
    values["nail_head_diameter"] = "nan"
    assert update() is False
    values["frame_width"] = "0"
    assert update() is False
    assert len(published) == 1

    values.update(frame_width="30", nail_head_diameter="8")
    assert update()
    assert published[-1].filename == "frame_30mm_x_20mm_nail_8mm_x_2mm.svg"


def test_parse_inputs():
    assert gen.parse_inputs(_form(frame_width=" 12.5 ")) == {
        "frame_width": 12.5,
        "frame_height": 20.0,
        "nail_head_diameter": 8.0,
        "nail_shank_diameter": 2.0,
    }
    assert gen.parse_inputs({"frame_width": "1"}) is None


def test_render_reports_fit_warnings():
    out = gen.render(gen.parse_inputs(_form(frame_width="5", frame_height="10")))
    assert out.warnings
