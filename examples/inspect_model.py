#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Пример: загрузить OBJ‑модель и вывести сводку по вершинному буферу.

    python examples/inspect_model.py examples/resources/cube.obj
    python examples/inspect_model.py model.obj --skip --parallel
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from wavemesh import ModelLoadError, load_model
from wavemesh.geometry import VERTEX_LAYOUT, VERTEX_STRIDE
from wavemesh.utils import logger

DEFAULT_MODEL = Path(__file__).parent / "resources" / "cube.obj"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Inspect a Wavefront OBJ model")
    parser.add_argument("path", nargs="?", default=str(DEFAULT_MODEL))
    parser.add_argument("--skip", action="store_true",
                        help="drop broken faces instead of rejecting the model")
    parser.add_argument("--parallel", action="store_true",
                        help="build faces in a thread pool")
    parser.add_argument("--show", type=int, default=3,
                        help="number of vertices to print")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    # --------------------------------------------------------------
    # 1️⃣  Загрузка (ошибка модели – не падение процесса)
    # --------------------------------------------------------------
    try:
        mesh = load_model(args.path,
                          on_error="skip" if args.skip else "abort",
                          parallel=args.parallel)
    except (ModelLoadError, FileNotFoundError) as exc:
        print(f"failed to load model {Path(args.path).name}: {exc}", file=sys.stderr)
        return 1

    # --------------------------------------------------------------
    # 2️⃣  Сводка
    # --------------------------------------------------------------
    centre, radius = mesh.bounding_sphere
    print(f"{mesh.name}: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles")
    print(f"layout: {', '.join(f'{n}[{s}]' for n, s in VERTEX_LAYOUT)} "
          f"(stride {VERTEX_STRIDE} bytes, {mesh.data.nbytes} bytes total)")
    print(f"bounding sphere: centre={centre.round(3).tolist()} radius={radius:.3f}")
    if mesh.vertex_count:
        lengths = np.linalg.norm(mesh.attribute("tangent_u"), axis=1)
        print(f"|tangent_u|: min={lengths.min():.3f} max={lengths.max():.3f}")
    for vertex in mesh.vertices[:args.show]:
        print(f"  {vertex}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
