# main.py — CLI: graph JSON -> interior faces, point query, neighbour layers
import argparse
import logging
import os
import sys

import structlog

from faces.config import PARAMS, LOCATE_METHODS
from faces.errors import MalformedGraphError
from faces.io import load_graph, save_faces
from faces.manager import PolygonManager
from faces.plot import plot_preview
from faces.prof import Prof


def build_parser():
    p = argparse.ArgumentParser(description="Extract the interior faces of a planar graph.")
    p.add_argument("input", help='JSON with "vertices" and "edges"')
    p.add_argument("--point", nargs=2, type=float, metavar=("X", "Y"),
                   help="report the face containing this point")
    p.add_argument("--layers", type=int, metavar="FACE_ID",
                   help="print the neighbour map radiating from this face")
    p.add_argument("--method", choices=LOCATE_METHODS, default=PARAMS["LOCATE_METHOD"])
    p.add_argument("--strict", action="store_true",
                   help="fail when a component does not have exactly one external face")
    p.add_argument("--out-json", help="write faces (with neighbours) here")
    p.add_argument("--out-png", help="write a preview image here")
    p.add_argument("--timings", action="store_true")
    p.add_argument("--timings-csv", metavar="PATH", help="also write stage timings as CSV")
    p.add_argument("-v", "--verbose", action="store_true", help="log extraction events")
    return p


def run(argv=None):
    args = build_parser().parse_args(argv)
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(
        logging.DEBUG if args.verbose else logging.WARNING))
    prof = Prof(enabled=args.timings or bool(args.timings_csv), out_csv=args.timings_csv)

    try:
        with prof.section("load"):
            G = load_graph(args.input)
        pm = PolygonManager(G, strict=args.strict, locate_method=args.method, prof=prof)
    except (ValueError, IndexError) as e:
        # MalformedGraphError is a ValueError too
        kind = "malformed graph" if isinstance(e, MalformedGraphError) else "bad input"
        print(f"ERROR: {kind}: {e}", file=sys.stderr)
        return 2

    print(f"Number of faces = {len(pm)}")
    for f in pm:
        print(f"Polygon #{f.id}: {f.indices}")

    face_id = None
    if args.point is not None:
        x, y = args.point
        face_id = pm.point_locate((x, y))
        print(f"Test Point = {x:.2f}, {y:.2f}")
        if face_id is None:
            print("Point is outside")
        else:
            print(f"Point is inside Face {face_id}")
            nbrs = pm.neighbors_of(face_id)
            if nbrs:
                print(f"Neighboring faces of face {face_id} are {', '.join(map(str, nbrs))}")
            else:
                print(f"face {face_id} has no neighboring faces")

    start = args.layers if args.layers is not None else face_id
    if start is not None:
        try:
            face_map = pm.neighbor_layers(start)
        except KeyError:
            print(f"ERROR: no face {start}", file=sys.stderr)
            return 2
        for fid, nbrs in face_map.items():
            print(f"Face {fid} has neighbors: {', '.join(map(str, nbrs))}")
        for depth, layer in enumerate(pm.layer_groups(start)):
            print(f"Layer {depth}: {layer}")

    if args.out_json:
        os.makedirs(os.path.dirname(args.out_json) or ".", exist_ok=True)
        pm.all_neighbors()
        save_faces(args.out_json, pm.faces, params={"method": args.method})
        print("saved:", args.out_json)

    if args.out_png:
        os.makedirs(os.path.dirname(args.out_png) or ".", exist_ok=True)
        with prof.section("preview"):
            png = plot_preview(G, pm.faces, highlight=face_id, point=args.point)
        with open(args.out_png, "wb") as f:
            f.write(png)
        print("saved:", args.out_png)

    if args.timings:
        prof.report_console()
    if args.timings_csv:
        prof.dump_csv()
        print("saved:", args.timings_csv)
    return 0


if __name__ == "__main__":
    sys.exit(run())
