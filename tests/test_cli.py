import json

import pytest

import keyholegen as gen

ARGS = ["--frame-width", "20", "--frame-height", "20", "--nail-head", "8", "--nail-shank", "2"]


def test_cli_writes_generated_filename_into_directory(tmp_path):
    assert gen.main(ARGS + ["--out", str(tmp_path)]) == 0
    out = tmp_path / "frame_20mm_x_20mm_nail_8mm_x_2mm.svg"
    assert out.exists()
    assert "<svg" in out.read_text(encoding="utf-8")


def test_cli_explicit_output_path(tmp_path):
    out = tmp_path / "slot.svg"
    assert gen.main(ARGS + ["--out", str(out), "--stroke-mm", "0.2"]) == 0
    assert "stroke-width: 0.2" in out.read_text(encoding="utf-8")


def test_cli_print_geometry(tmp_path, capsys):
    gen.main(ARGS + ["--out", str(tmp_path), "--print-geometry"])
    data = json.loads(capsys.readouterr().out)
    assert data["hole_width"] == pytest.approx(9.0)
    assert data["hole_to_top_distance"] == pytest.approx(1.5)
    assert data["centered"] is True


def test_cli_rejects_degenerate_nail(tmp_path):
    argv = ["--frame-width", "20", "--frame-height", "20", "--nail-head", "2", "--nail-shank", "2"]
    with pytest.raises(SystemExit) as exc:
        gen.main(argv + ["--out", str(tmp_path)])
    assert exc.value.code == 2
    assert list(tmp_path.iterdir()) == []
