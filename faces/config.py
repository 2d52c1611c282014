# faces/config.py
PARAMS = {
    "EPS_ON_EDGE": 1e-9,       # boundary tolerance for point location
    "EPS_AREA": 1e-12,         # |shoelace sum| at or below this bounds nothing
    "LOCATE_METHOD": "ray",    # "ray" | "winding"
    "STRICT_EXTERNAL": False,  # raise on a component with != 1 external face

    "PREVIEW_SIZE": 7,         # inches
    "PREVIEW_DPI": 150,
    "PREVIEW_LW": 0.8,
}

LOCATE_METHODS = ("ray", "winding")
