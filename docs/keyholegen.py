#!/usr/bin/env python3
"""keyholegen.py

Parametric SVG generator for laser-cut picture-frame keyhole slots.

A nail head passes through a round insertion hole, then the frame drops so the
shank slides into a narrow slot. The head rests on an engraved shelf whose
catch shoulder ("cusp") is where the hole circle meets the slot walls.

Geometry:
- hole_width  = head + 2 * head_clearance,  hole_height = 2 * hole_width
- slot_width  = shank + 2 * shank_clearance
- hole_to_top = min(nail_to_top - hole_width / 2, (frame_h_extra - hole_height) / 2)
  (short test pieces get the hole centered instead of hung at the nominal offset)
- cusp_height = sqrt(R_hole^2 - R_slot^2) measured from the insertion hole center.
  The engraved shelf uses both radii reduced by engrave_bleed, which is the
  concentric offset of the cut shoulder, so the pocket overlaps the cut wall.

Notes:
- 1 SVG unit = 1 mm, origin top-left, workpiece inset by doc_margin.
- SVG layers:
  CUT: red stroke (workpiece outline + keyhole contour)
  ENGRAVE: black fill (shelf pocket)
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import os
import sys
import textwrap
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Callable, ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote

__version__ = "0.3"

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

INPUT_FIELDS = ("frame_width", "frame_height", "nail_head_diameter", "nail_shank_diameter")


class KeyholeError(ValueError):
    """Base class for inputs the generator refuses to draw."""


class InvalidDimension(KeyholeError):
    pass


class DegenerateGeometry(KeyholeError):
    pass


def fmt(n: float) -> str:
    s = f"{n:.3f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def format_dimension(value: float) -> str:
    """Render a user dimension the way the form shows it: 20 -> "20", 8.5 -> "8.5"."""

    v = float(value)
    if v.is_integer():
        return str(int(v))
    return repr(v)


@dataclass(frozen=True)
class Tolerances:
    # Per side, double for a diameter. 0.5 mm keeps the head resting on the
    # shelf instead of wedging in the slightly conical engraved hole.
    head_clearance: float = 0.5
    shank_clearance: float = 0.1
    # Nail center to frame top when hanging.
    nail_to_top_distance: float = 20.0
    doc_margin: float = 10.0
    # Engraving overlaps the cut-away area by this much.
    engrave_bleed: float = 0.5
    # Added to nominal frame width and height.
    extra_frame_size: float = 1.0

    def __post_init__(self):
        for f in fields(self):
            v = getattr(self, f.name)
            if not math.isfinite(v) or v < 0:
                raise ValueError(f"Tolerance {f.name} must be a finite value >= 0 (got {v!r})")


DEFAULT_TOLERANCES = Tolerances()


@dataclass(frozen=True)
class Dimensions:
    frame_width: float
    frame_height: float
    nail_head_diameter: float
    nail_shank_diameter: float


@dataclass(frozen=True)
class DerivedGeometry:
    frame_width_with_extra: float
    frame_height_with_extra: float
    hole_width: float
    hole_height: float
    slot_width: float
    hole_to_top_distance: float
    cusp_height_cut: float
    cusp_height_engrave: float
    # True when the hole was centered on a short piece instead of hung at the nominal offset.
    centered: bool


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


# ---------------------------------------------------------------------------
# Path segments
# ---------------------------------------------------------------------------


class SegmentKind(str, Enum):
    MOVE = "M"
    LINE = "L"
    ARC = "A"
    CLOSE = "Z"


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float
    kind: ClassVar[SegmentKind] = SegmentKind.MOVE

    def to_svg(self) -> str:
        return f"M {fmt(self.x)} {fmt(self.y)}"


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float
    kind: ClassVar[SegmentKind] = SegmentKind.LINE

    def to_svg(self) -> str:
        return f"L {fmt(self.x)} {fmt(self.y)}"


@dataclass(frozen=True)
class ArcTo:
    """Elliptical arc in SVG endpoint form. Keyhole arcs are always circular (rx == ry)."""

    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float
    kind: ClassVar[SegmentKind] = SegmentKind.ARC

    def to_svg(self) -> str:
        return (
            f"A {fmt(self.rx)} {fmt(self.ry)} {fmt(self.rotation)} "
            f"{int(self.large_arc)} {int(self.sweep)} {fmt(self.x)} {fmt(self.y)}"
        )


@dataclass(frozen=True)
class Close:
    kind: ClassVar[SegmentKind] = SegmentKind.CLOSE

    def to_svg(self) -> str:
        return "Z"


Segment = Union[MoveTo, LineTo, ArcTo, Close]


def arc_polyline(p0: Point, arc: ArcTo, *, steps: int = 24) -> List[Point]:
    """Sample a circular SVG arc from p0; returns points after p0, ending on the arc endpoint.

    Follows the SVG endpoint-to-center conversion (rotation ignored, radii scaled
    up when too small to span the chord).
    """

    x1, y1 = p0
    x2, y2 = arc.x, arc.y
    r = abs(arc.rx)
    hx = (x1 - x2) / 2
    hy = (y1 - y2) / 2
    d2 = hx * hx + hy * hy
    if r <= 1e-12 or d2 <= 1e-24:
        return [(x2, y2)]
    if d2 > r * r:
        r = math.sqrt(d2)
    coef = math.sqrt(max(0.0, (r * r - d2) / d2))
    if arc.large_arc == arc.sweep:
        coef = -coef
    cxp = coef * hy
    cyp = -coef * hx
    cx = cxp + (x1 + x2) / 2
    cy = cyp + (y1 + y2) / 2
    t1 = math.atan2((hy - cyp) / r, (hx - cxp) / r)
    t2 = math.atan2((-hy - cyp) / r, (-hx - cxp) / r)
    dt = t2 - t1
    if arc.sweep and dt < 0:
        dt += 2 * math.pi
    elif not arc.sweep and dt > 0:
        dt -= 2 * math.pi

    n = max(1, int(steps))
    pts = [(cx + r * math.cos(t1 + dt * i / n), cy + r * math.sin(t1 + dt * i / n)) for i in range(1, n)]
    pts.append((x2, y2))
    return pts


@dataclass(frozen=True)
class Path:
    segments: Tuple[Segment, ...]

    @property
    def start(self) -> Point:
        first = self.segments[0]
        if not isinstance(first, MoveTo):
            raise ValueError("Path must start with a MoveTo")
        return (first.x, first.y)

    def points(self) -> List[Point]:
        """Pen position after each segment, in order."""

        pts: List[Point] = []
        start = self.start
        for seg in self.segments:
            if isinstance(seg, Close):
                pts.append(start)
            else:
                pts.append((seg.x, seg.y))
                if isinstance(seg, MoveTo):
                    start = (seg.x, seg.y)
        return pts

    def is_closed(self, tol: float = 1e-9) -> bool:
        """True if the last drawn segment returns to the start, so the Z adds no edge."""

        if len(self.segments) < 3 or not isinstance(self.segments[-1], Close):
            return False
        last = self.segments[-2]
        if isinstance(last, (MoveTo, Close)):
            return False
        sx, sy = self.start
        return abs(last.x - sx) <= tol and abs(last.y - sy) <= tol

    def to_svg_d(self) -> str:
        return " ".join(seg.to_svg() for seg in self.segments)

    def flatten(self, *, steps_per_arc: int = 24) -> List[Point]:
        """Polyline approximation of the contour (no repeated closing point)."""

        pts: List[Point] = []
        pen = self.start
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                pen = (seg.x, seg.y)
                pts.append(pen)
            elif isinstance(seg, LineTo):
                pen = (seg.x, seg.y)
                pts.append(pen)
            elif isinstance(seg, ArcTo):
                pts.extend(arc_polyline(pen, seg, steps=steps_per_arc))
                pen = (seg.x, seg.y)
        if len(pts) > 1 and abs(pts[-1][0] - pts[0][0]) < 1e-9 and abs(pts[-1][1] - pts[0][1]) < 1e-9:
            pts.pop()
        return pts


class PathBuilder:
    """Tracks the pen so relative moves can be stored as absolute segments."""

    def __init__(self, x: float, y: float):
        self.segments: List[Segment] = [MoveTo(x, y)]
        self.pen: Point = (x, y)

    def line_by(self, dx: float, dy: float) -> "PathBuilder":
        self.pen = (self.pen[0] + dx, self.pen[1] + dy)
        self.segments.append(LineTo(*self.pen))
        return self

    def arc_by(self, radius: float, dx: float, dy: float, *, sweep: bool, large_arc: bool = False) -> "PathBuilder":
        self.pen = (self.pen[0] + dx, self.pen[1] + dy)
        self.segments.append(ArcTo(radius, radius, 0.0, large_arc, sweep, *self.pen))
        return self

    def close(self) -> Path:
        self.segments.append(Close())
        return Path(tuple(self.segments))


def polygon_area(points: List[Point]) -> float:
    if len(points) < 3:
        return 0.0
    a = 0.0
    for (x0, y0), (x1, y1) in zip(points, points[1:] + [points[0]]):
        a += x0 * y1 - x1 * y0
    return 0.5 * a


def point_in_polygon(p: Point, polygon: List[Point]) -> bool:
    x, y = p
    inside = False
    for (x0, y0), (x1, y1) in zip(polygon, polygon[1:] + polygon[:1]):
        if (y0 > y) != (y1 > y):
            xi = x0 + (y - y0) * (x1 - x0) / (y1 - y0)
            if x < xi:
                inside = not inside
    return inside


# ---------------------------------------------------------------------------
# Geometry engine
# ---------------------------------------------------------------------------


def validate_dimensions(
    frame_width: float,
    frame_height: float,
    nail_head_diameter: float,
    nail_shank_diameter: float,
) -> Dimensions:
    values: Dict[str, float] = {}
    raw = dict(zip(INPUT_FIELDS, (frame_width, frame_height, nail_head_diameter, nail_shank_diameter)))
    for name, v in raw.items():
        if v is None:
            raise InvalidDimension(f"{name} is missing")
        try:
            fv = float(v)
        except (TypeError, ValueError):
            raise InvalidDimension(f"{name} is not a number: {v!r}") from None
        if not math.isfinite(fv):
            raise InvalidDimension(f"{name} must be finite (got {fv!r})")
        if fv <= 0:
            raise InvalidDimension(f"{name} must be > 0 (got {format_dimension(fv)})")
        values[name] = fv
    return Dimensions(**values)


def cusp_height(hole_radius: float, slot_radius: float, *, what: str = "cut") -> float:
    """Height above the hole center where the hole circle meets the slot wall.

    A bled slot radius may be zero or negative on very thin shanks; only the
    squares matter here and the arc is drawn with |r|.
    """

    radicand = hole_radius ** 2 - slot_radius ** 2
    if radicand <= 0:
        raise DegenerateGeometry(
            f"{what} hole radius {fmt(hole_radius)} does not exceed slot radius {fmt(slot_radius)}; no shoulder"
        )
    return math.sqrt(radicand)


def derive_geometry(dims: Dimensions, tolerances: Tolerances = DEFAULT_TOLERANCES) -> DerivedGeometry:
    if dims.nail_head_diameter <= dims.nail_shank_diameter:
        raise DegenerateGeometry(
            f"Nail head ({format_dimension(dims.nail_head_diameter)}mm) must be wider than "
            f"the shank ({format_dimension(dims.nail_shank_diameter)}mm) to catch on the shelf"
        )

    t = tolerances
    frame_width_with_extra = dims.frame_width + t.extra_frame_size
    frame_height_with_extra = dims.frame_height + t.extra_frame_size

    hole_width = dims.nail_head_diameter + 2 * t.head_clearance
    hole_height = 2 * hole_width
    slot_width = dims.nail_shank_diameter + 2 * t.shank_clearance

    nominal = t.nail_to_top_distance - hole_width / 2
    centered_dist = (frame_height_with_extra - hole_height) / 2
    hole_to_top_distance = min(nominal, centered_dist)

    cut = cusp_height(hole_width / 2, slot_width / 2, what="cut")
    engrave = cusp_height(
        hole_width / 2 - t.engrave_bleed,
        slot_width / 2 - t.engrave_bleed,
        what="engrave",
    )
    return DerivedGeometry(
        frame_width_with_extra=frame_width_with_extra,
        frame_height_with_extra=frame_height_with_extra,
        hole_width=hole_width,
        hole_height=hole_height,
        slot_width=slot_width,
        hole_to_top_distance=hole_to_top_distance,
        cusp_height_cut=cut,
        cusp_height_engrave=engrave,
        centered=centered_dist < nominal,
    )


def interior_curve(pen: PathBuilder, *, hole_radius: float, slot_radius: float, cusp: float, rise: float) -> PathBuilder:
    """Trace the shoulder and slot, right side to left side.

    Starts on the insertion hole's right edge at its center line, climbs the
    hole arc to the cusp, runs up the slot wall by `rise - cusp`, rounds the
    slot top and comes back down to the opposite cusp and hole edge.
    """

    inward = hole_radius - slot_radius
    pen.arc_by(hole_radius, -inward, -cusp, sweep=False)
    pen.line_by(0, cusp - rise)
    pen.arc_by(slot_radius, -2 * slot_radius, 0, sweep=False)
    pen.line_by(0, rise - cusp)
    pen.arc_by(hole_radius, -inward, cusp, sweep=False)
    return pen


def build_cut_path(g: DerivedGeometry, tolerances: Tolerances = DEFAULT_TOLERANCES) -> Path:
    m = tolerances.doc_margin
    cx = g.frame_width_with_extra / 2 + m
    top = g.hole_to_top_distance + m
    r = g.hole_width / 2

    pen = PathBuilder(cx + r, top + g.hole_height - r)
    interior_curve(
        pen,
        hole_radius=r,
        slot_radius=g.slot_width / 2,
        cusp=g.cusp_height_cut,
        rise=g.hole_height - g.hole_width,
    )
    pen.arc_by(r, g.hole_width, 0, sweep=False)
    return pen.close()


def build_shelf_path(g: DerivedGeometry, tolerances: Tolerances = DEFAULT_TOLERANCES) -> Path:
    m = tolerances.doc_margin
    b = tolerances.engrave_bleed
    cx = g.frame_width_with_extra / 2 + m
    top = g.hole_to_top_distance + m
    r = g.hole_width / 2

    # The mouth arc is full size; only the shoulder and slot are inset.
    pen = PathBuilder(cx - r, top + r)
    pen.arc_by(r, g.hole_width, 0, sweep=True)
    pen.line_by(0, g.hole_height - g.hole_width)
    pen.line_by(-b, 0)
    interior_curve(
        pen,
        hole_radius=r - b,
        slot_radius=g.slot_width / 2 - b,
        cusp=g.cusp_height_engrave,
        rise=g.hole_height - g.hole_width,
    )
    pen.line_by(-b, 0)
    # Back up the left wall to the mouth.
    pen.line_by(0, g.hole_width - g.hole_height)
    return pen.close()


@dataclass(frozen=True)
class KeyholeResult:
    dimensions: Dimensions
    tolerances: Tolerances
    geometry: DerivedGeometry
    canvas_size: Tuple[float, float]
    outline_rect: Rect
    shelf_path: Path
    cut_path: Path


def compute(
    frame_width: float,
    frame_height: float,
    nail_head_diameter: float,
    nail_shank_diameter: float,
    *,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> KeyholeResult:
    """Compute the keyhole slot for one frame/nail combination.

    Raises InvalidDimension for missing, non-finite or non-positive inputs and
    DegenerateGeometry when the head cannot catch on the shank slot.
    """

    dims = validate_dimensions(frame_width, frame_height, nail_head_diameter, nail_shank_diameter)
    g = derive_geometry(dims, tolerances)
    m = tolerances.doc_margin
    logger.debug(
        f"hole {fmt(g.hole_width)}x{fmt(g.hole_height)} slot {fmt(g.slot_width)} "
        f"top {fmt(g.hole_to_top_distance)} cusp {fmt(g.cusp_height_cut)}/{fmt(g.cusp_height_engrave)}"
    )
    return KeyholeResult(
        dimensions=dims,
        tolerances=tolerances,
        geometry=g,
        canvas_size=(g.frame_width_with_extra + 2 * m, g.frame_height_with_extra + 2 * m),
        outline_rect=Rect(m, m, g.frame_width_with_extra, g.frame_height_with_extra),
        shelf_path=build_shelf_path(g, tolerances),
        cut_path=build_cut_path(g, tolerances),
    )


def fit_warnings(g: DerivedGeometry) -> List[str]:
    warnings: List[str] = []
    if g.hole_height > g.frame_height_with_extra:
        warnings.append(
            f"Keyhole ({fmt(g.hole_height)}mm tall) is taller than the workpiece ({fmt(g.frame_height_with_extra)}mm)"
        )
    if g.hole_width > g.frame_width_with_extra:
        warnings.append(
            f"Keyhole ({fmt(g.hole_width)}mm wide) is wider than the workpiece ({fmt(g.frame_width_with_extra)}mm)"
        )
    if g.hole_to_top_distance < 0:
        warnings.append("Keyhole extends above the top edge of the workpiece")
    return warnings


# ---------------------------------------------------------------------------
# SVG document
# ---------------------------------------------------------------------------


def svg_header(width: float, height: float) -> str:
    return (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>\n"
        f"<svg xmlns=\"http://www.w3.org/2000/svg\" width=\"{fmt(width)}mm\" height=\"{fmt(height)}mm\" viewBox=\"0 0 {fmt(width)} {fmt(height)}\">\n"
        f"  <desc>Generated by keyholegen v{__version__}</desc>\n"
    )


def svg_footer() -> str:
    return "</svg>\n"


def svg_layer_styles(*, stroke_mm: float = 0.1) -> str:
    s = max(0.001, float(stroke_mm))
    return (
        "  <style>\n"
        f"    .cut {{ fill: none; stroke: #ff0000; stroke-width: {fmt(s)}; }}\n"
        "    .engrave { fill: #000000; stroke: none; }\n"
        "  </style>\n"
    )


def make_svg(result: KeyholeResult, *, stroke_mm: float = 0.1, meta: Optional[Dict[str, object]] = None) -> str:
    W, H = result.canvas_size
    rect = result.outline_rect
    if meta is None:
        meta = asdict(result.dimensions)
    meta_comment = "\n".join(textwrap.wrap(json.dumps(meta, ensure_ascii=False), width=120))

    out: List[str] = [svg_header(W, H), svg_layer_styles(stroke_mm=stroke_mm)]
    out.append(f"  <!-- params: {meta_comment} -->\n")
    out.append('  <g id="ENGRAVE" class="engrave">\n')
    out.append(f'    <path id="shelf" d="{result.shelf_path.to_svg_d()}"/>\n')
    out.append("  </g>\n")
    out.append('  <g id="CUT" class="cut">\n')
    out.append(
        f'    <rect id="outline" x="{fmt(rect.x)}" y="{fmt(rect.y)}" '
        f'width="{fmt(rect.width)}" height="{fmt(rect.height)}"/>\n'
    )
    out.append(f'    <path id="keyhole" d="{result.cut_path.to_svg_d()}"/>\n')
    out.append("  </g>\n")
    out.append(svg_footer())
    return "".join(out)


def export_filename(dims: Dimensions) -> str:
    return (
        f"frame_{format_dimension(dims.frame_width)}mm_x_{format_dimension(dims.frame_height)}mm"
        f"_nail_{format_dimension(dims.nail_head_diameter)}mm_x_{format_dimension(dims.nail_shank_diameter)}mm.svg"
    )


def export_document(result: KeyholeResult, *, stroke_mm: float = 0.1) -> Tuple[str, bytes]:
    """Return (filename, UTF-8 SVG bytes) for download."""

    svg = make_svg(result, stroke_mm=stroke_mm)
    return export_filename(result.dimensions), svg.encode("utf-8")


def svg_data_uri(svg: str) -> str:
    return "data:image/svg+xml;charset=utf-8," + quote(svg, safe="!~*'()")


# ---------------------------------------------------------------------------
# Live form adapter
# ---------------------------------------------------------------------------


@dataclass
class RenderOutput:
    result: KeyholeResult
    svg: str
    filename: str
    warnings: List[str] = field(default_factory=list)

    @property
    def data_uri(self) -> str:
        return svg_data_uri(self.svg)


def parse_inputs(raw: Mapping[str, object]) -> Optional[Dict[str, float]]:
    """Parse form values; None if any field is missing or not a number."""

    values: Dict[str, float] = {}
    for name in INPUT_FIELDS:
        v = raw.get(name)
        if v is None:
            return None
        try:
            values[name] = float(str(v).strip())
        except ValueError:
            return None
    return values


def render(values: Mapping[str, float], *, tolerances: Tolerances = DEFAULT_TOLERANCES, stroke_mm: float = 0.1) -> RenderOutput:
    result = compute(**values, tolerances=tolerances)
    return RenderOutput(
        result=result,
        svg=make_svg(result, stroke_mm=stroke_mm),
        filename=export_filename(result.dimensions),
        warnings=fit_warnings(result.geometry),
    )


def make_update(
    read_inputs: Callable[[], Mapping[str, object]],
    publish: Callable[[RenderOutput], None],
    *,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
    stroke_mm: float = 0.1,
) -> Callable[[], bool]:
    """Bind an input source and an output sink to the engine.

    The returned callable re-renders on every call. Unparseable or rejected
    inputs publish nothing, so the last good render stays on screen.
    """

    def update() -> bool:
        values = parse_inputs(read_inputs())
        if values is None:
            logger.debug("Skipping render: a field is empty or not a number")
            return False
        try:
            out = render(values, tolerances=tolerances, stroke_mm=stroke_mm)
        except KeyholeError as e:
            logger.debug(f"Skipping render: {e}")
            return False
        publish(out)
        return True

    return update


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[argparse.ArgumentParser, argparse.Namespace]:
    ap = argparse.ArgumentParser(
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Laser-cut keyhole slot generator for hanging picture frames on a nail.\n\n"
            "Outputs an SVG with the workpiece outline and keyhole (CUT) and the shelf pocket (ENGRAVE).\n"
        ),
    )
    ap.add_argument("--frame-width", type=float, required=True, help="Frame width (mm)")
    ap.add_argument("--frame-height", type=float, required=True, help="Frame height (mm)")
    ap.add_argument("--nail-head", type=float, required=True, help="Nail head diameter (mm)")
    ap.add_argument("--nail-shank", type=float, required=True, help="Nail shank diameter (mm)")
    ap.add_argument(
        "--out",
        default=None,
        help="Output SVG path or directory (default: generated filename in the current directory)",
    )
    ap.add_argument("--stroke-mm", type=float, default=0.1, help="SVG stroke width for CUT lines (mm)")
    ap.add_argument("--print-geometry", action="store_true", help="Print derived geometry as JSON")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap, ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap, args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = compute(args.frame_width, args.frame_height, args.nail_head, args.nail_shank)
    except KeyholeError as e:
        ap.error(str(e))

    g = result.geometry
    if g.centered:
        logger.info(f"Workpiece too short for the nominal hang distance; hole centered at {fmt(g.hole_to_top_distance)}mm")
    for w in fit_warnings(g):
        logger.warning(w)

    if args.print_geometry:
        print(json.dumps(asdict(g), indent=2))

    filename, data = export_document(result, stroke_mm=args.stroke_mm)
    out_path = args.out
    if out_path is None:
        out_path = filename
    elif os.path.isdir(out_path):
        out_path = os.path.join(out_path, filename)
    with open(out_path, "wb") as f:
        f.write(data)
    logger.info(f"Wrote {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
