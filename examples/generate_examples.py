#!/usr/bin/env python3

import os
import sys

# Allow running this script directly (sys.path[0] is examples/).
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import keyholegen as gen


def generate(out_dir: str):
    os.makedirs(out_dir, exist_ok=True)

    examples = [
        # A5 photo frame, common panel pin.
        dict(frame_width=148, frame_height=210, nail_head_diameter=8, nail_shank_diameter=2),
        # 2x2 cm test piece: the hole gets centered.
        dict(frame_width=20, frame_height=20, nail_head_diameter=8, nail_shank_diameter=2),
        # Picture hook nail.
        dict(frame_width=300, frame_height=400, nail_head_diameter=6.5, nail_shank_diameter=1.6),
    ]

    for params in examples:
        result = gen.compute(**params)
        filename, data = gen.export_document(result)
        with open(os.path.join(out_dir, filename), "wb") as f:
            f.write(data)


if __name__ == "__main__":
    generate(os.path.join(os.path.dirname(__file__)))
