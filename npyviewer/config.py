"""
Global configuration dictionary and default parameters used across NpyViewer.

Stores hit-test radii, marker styling, the axis limits shown before any file is
loaded, and the logging level shared by the interface and UI modules.
"""

con_dict = {
    # pointer hit-testing (pixels)
    "hit_radius_px": 10.0,

    # marker styling
    "marker_radius": 5.0,
    "hover_marker_radius": 7.0,
    "hover_ring_radius": 3.0,
    "marker_colour": 0xFF0000,

    # axis limits used until a file is loaded
    "initial_xmin": 0.0,
    "initial_xmax": 0.015,
    "initial_ymin": 0.0,
    "initial_ymax": 20.0,

    "log_level": "INFO",
}


def set_value(key, value):
    if key not in con_dict:
        raise KeyError(key)
    # naive cast
    ty = type(con_dict[key])
    if ty is int and isinstance(value, str):
        # allows colours to be typed as 0xFF0000
        con_dict[key] = int(value, 0)
        return
    con_dict[key] = ty(value)


def get_all():
    return con_dict
