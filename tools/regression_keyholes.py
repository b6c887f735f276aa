#!/usr/bin/env python3

import argparse
import json
import sys
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from keyholegen import INPUT_FIELDS, compute, export_document, fit_warnings

SVG_NS = "{http://www.w3.org/2000/svg}"
EXPECTED_IDS = {"outline", "keyhole", "shelf"}


@dataclass
class Case:
    name: str
    params: Dict[str, Any]
    source_file: Path


def _read_case(path: Path) -> Case:
    data = json.loads(path.read_text(encoding="utf-8"))
    name = str(data.get("name", "")).strip() or path.stem
    params = data.get("params")
    if not isinstance(params, dict):
        raise TypeError(f"{path}: params must be an object/dict")
    missing = [k for k in INPUT_FIELDS if k not in params]
    extra = sorted(set(params) - set(INPUT_FIELDS))
    if missing or extra:
        raise ValueError(f"{path}: params mismatch. Missing={missing} Extra={extra}")
    return Case(name=name, params=params, source_file=path)


def _iter_cases(params_dir: Path) -> List[Case]:
    if not params_dir.exists():
        raise FileNotFoundError(f"Params dir not found: {params_dir}")

    cases: List[Case] = []
    for p in sorted(params_dir.glob("*.json")):
        cases.append(_read_case(p))

    if not cases:
        raise FileNotFoundError(f"No *.json found in: {params_dir}")

    return cases


def _validate_svg(data: bytes, *, name: str) -> None:
    if not data.strip():
        raise ValueError(f"{name}: empty svg")
    root = ET.fromstring(data)
    if root.tag != f"{SVG_NS}svg":
        raise ValueError(f"{name}: root element is {root.tag!r}, not svg")
    ids = {el.get("id") for el in root.iter() if el.get("id")}
    missing = sorted(EXPECTED_IDS - ids)
    if missing:
        raise ValueError(f"{name}: svg is missing elements {missing}")
    for el in root.iter(f"{SVG_NS}path"):
        if "nan" in el.get("d", "").lower():
            raise ValueError(f"{name}: path {el.get('id')} has NaN coordinates")


def main(argv: List[str]) -> int:
    ap = argparse.ArgumentParser(description="Generate and validate keyhole SVGs for a set of regression cases.")
    ap.add_argument(
        "--params-dir",
        default="examples/regression_params",
        help="Directory containing *.json files with {name, params} (default: %(default)s)",
    )
    ap.add_argument(
        "--out-dir",
        default="artifacts/regression",
        help="Output directory for generated SVGs (default: %(default)s)",
    )
    args = ap.parse_args(argv)

    params_dir = Path(args.params_dir)
    out_dir = Path(args.out_dir)
    cases = _iter_cases(params_dir)

    failures: List[Tuple[str, str]] = []
    for c in cases:
        try:
            result = compute(**c.params)
            if not (result.cut_path.is_closed() and result.shelf_path.is_closed()):
                raise ValueError("open contour")
            filename, data = export_document(result)
            _validate_svg(data, name=c.name)

            out_path = out_dir / filename
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_bytes(data)

            print(f"OK  {c.name} -> {out_path}")
            for w in fit_warnings(result.geometry):
                print(f"    warning: {w}")
        except Exception as e:
            failures.append((c.name, str(e)))
            print(f"FAIL {c.name}: {e}", file=sys.stderr)

    if failures:
        print("\nFailures:", file=sys.stderr)
        for name, msg in failures:
            print(f"- {name}: {msg}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
