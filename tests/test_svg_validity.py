import xml.etree.ElementTree as ET

import keyholegen as gen

SVG = "{http://www.w3.org/2000/svg}"


def test_svg_is_valid_xml(tmp_path):
    # Smoke test: generator should output parseable XML.
    r = gen.compute(100, 150, 8, 2)
    svg = gen.make_svg(r)

    out = tmp_path / "out.svg"
    out.write_text(svg, encoding="utf-8")
    root = ET.parse(str(out)).getroot()

    assert root.tag == f"{SVG}svg"
    assert root.get("width") == "121mm"
    assert root.get("height") == "171mm"
    assert root.get("viewBox") == "0 0 121 171"


def test_svg_layers():
    r = gen.compute(100, 150, 8, 2)
    root = ET.fromstring(gen.make_svg(r, stroke_mm=0.2).encode("utf-8"))
    groups = {g.get("id"): g for g in root.iter(f"{SVG}g")}
    assert groups["CUT"].get("class") == "cut"
    assert groups["ENGRAVE"].get("class") == "engrave"

    rect = groups["CUT"].find(f"{SVG}rect")
    assert (rect.get("x"), rect.get("y"), rect.get("width"), rect.get("height")) == ("10", "10", "101", "151")
    assert groups["CUT"].find(f"{SVG}path").get("d") == r.cut_path.to_svg_d()
    assert groups["ENGRAVE"].find(f"{SVG}path").get("d") == r.shelf_path.to_svg_d()
    assert "stroke-width: 0.2" in root.find(f"{SVG}style").text


def test_path_data_uses_absolute_commands():
    d = gen.compute(100, 150, 8, 2).cut_path.to_svg_d()
    assert d.startswith("M 65 39 A 4.5 4.5 0 0 0 ")
    assert d.endswith(" A 4.5 4.5 0 0 0 65 39 Z")
    assert "nan" not in d.lower()


def test_export_filename():
    r = gen.compute(20, 20, 8, 2)
    filename, data = gen.export_document(r)
    assert filename == "frame_20mm_x_20mm_nail_8mm_x_2mm.svg"
    assert data.startswith(b"<?xml")
    ET.fromstring(data)


def test_export_filename_keeps_fractions():
    dims = gen.validate_dimensions(100.5, 150, 6.5, 1.6)
    assert gen.export_filename(dims) == "frame_100.5mm_x_150mm_nail_6.5mm_x_1.6mm.svg"


def test_data_uri():
    uri = gen.svg_data_uri('<svg width="1mm"/>')
    assert uri == "data:image/svg+xml;charset=utf-8,%3Csvg%20width%3D%221mm%22%2F%3E"


def test_fmt():
    assert gen.fmt(1.0) == "1"
    assert gen.fmt(2.2000001) == "2.2"
    assert gen.fmt(-0.0001) == "0"
