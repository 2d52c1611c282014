# app.py — upload a graph JSON, preview its faces, query a point and its neighbour layers

import json

import streamlit as st

from faces.config import PARAMS, LOCATE_METHODS
from faces.errors import MalformedGraphError
from faces.io import loads_graph
from faces.manager import PolygonManager
from faces.plot import plot_preview


def _bbox(G):
    xs = [p[0] for p in G.vertices] or [0.0]
    ys = [p[1] for p in G.vertices] or [0.0]
    return min(xs), min(ys), max(xs), max(ys)


st.set_page_config(page_title="Planar faces", layout="wide")
st.title("Planar faces")

with st.sidebar:
    st.header("Settings")
    method = st.selectbox(
        "Point-in-polygon test", LOCATE_METHODS,
        index=LOCATE_METHODS.index(PARAMS["LOCATE_METHOD"]),
        help="Both treat points on the boundary as inside."
    )
    strict = st.checkbox(
        "Strict planarity check",
        value=PARAMS["STRICT_EXTERNAL"],
        help="Reject graphs where a component does not yield exactly one external face "
             "(crossing or overlapping edges)."
    )

uploaded = st.file_uploader("Graph JSON", type=["json"])
if uploaded is None:
    st.info('Upload {"vertices": [[x, y], ...], "edges": [[from, to], ...]}')
    st.stop()

try:
    pm = PolygonManager(loads_graph(uploaded.getvalue()), strict=strict, locate_method=method)
except MalformedGraphError as e:
    st.error(f"Malformed graph: {e}")
    st.stop()
except (ValueError, IndexError) as e:
    st.error(f"Could not read graph: {e}")
    st.stop()

G = pm.graph
xmin, ymin, xmax, ymax = _bbox(G)

st.write(f"Number of faces = {len(pm)}")

col_img, col_info = st.columns([2, 1])
with col_info:
    st.subheader("Query point")
    x = st.number_input("x", value=float((xmin + xmax) / 2))
    y = st.number_input("y", value=float((ymin + ymax) / 2))
    face_id = pm.point_locate((x, y))
    if face_id is None:
        st.write("Point is outside")
    else:
        st.write(f"Point is inside Face {face_id}")
        nbrs = pm.neighbors_of(face_id)
        st.write(f"Neighboring faces: {nbrs}" if nbrs else "No neighboring faces")
        st.subheader("Neighbour layers")
        for depth, layer in enumerate(pm.layer_groups(face_id)):
            st.write(f"Layer {depth}: {layer}")

    st.download_button(
        "Download faces JSON",
        data=json.dumps(pm.to_dict(), ensure_ascii=False, indent=2).encode("utf-8"),
        file_name="faces.json",
        mime="application/json",
    )

with col_img:
    png = plot_preview(G, pm.faces, highlight=face_id, point=(x, y),
                       title=uploaded.name)
    st.image(png, use_container_width=True)

with st.expander("Faces"):
    for f in pm:
        st.write(f"Polygon #{f.id}: {f.indices}  {f.color_css}")
