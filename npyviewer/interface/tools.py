"""
High-level utility functions for loading arrays, calibrating axes and managing
annotation points. Used by UI pages to manipulate the CurrentContext.
"""
import logging
from pathlib import Path

from .. import config
from ..array_ops import normalize_to_raster
from ..models import ArrayDataset, AxisLimits, CurrentContext, DecodeError
from .interaction import InteractionController

logger = logging.getLogger(__name__)

#======Getting and setting app configs ========================================


def get_config():
    """
    Loads the config dictionary - a single mutable dictionary of config
    patterns used accross the app
    """
    return config.get_all()

def modify_config(key, value):
    """
    Sets user selected values in the config dictionary - a single mutable
    dictionary of config patterns used accross the app
    """
    config.set_value(key, value)

#==== Data loading helper functions ===========================================

def load(path):
    """
    Decode a .npy file into an ArrayDataset.

    Raises DecodeError for anything that is not a non-empty 2-D numeric array.
    """
    if not path:
        raise DecodeError("No file selected")
    return ArrayDataset.from_path(Path(path))


def normalize(dataset: ArrayDataset):
    """Min/max stretch of the dataset into a display raster."""
    return normalize_to_raster(dataset.data)


def open_array(cxt: CurrentContext, path) -> bool:
    """
    Load ``path`` into the context.

    The loading flag is raised for the duration and always lowered again.
    On success the store is cleared and the new dataset and raster are
    installed together; on a DecodeError the previous raster stays on screen
    and ``cxt.error`` carries the message.

    Returns
    -------
    bool
        True if the new array was installed.
    """
    cxt.begin_load()
    try:
        dataset = load(path)
        raster = normalize(dataset)
        cxt.install(dataset, raster)
        logger.info(f"Loaded {dataset.path.name}: min {raster.vmin}, max {raster.vmax}")
        return True
    except DecodeError as e:
        logger.warning(f"Failed to load {path}: {e}")
        cxt.fail_load(str(e))
        return False
    finally:
        cxt.finish_load()


def attach_controller(cxt: CurrentContext) -> InteractionController:
    """
    Create the pointer state machine for this context's store.

    New points sample the raw value of whatever dataset is current at the
    time of the click.
    """
    controller = InteractionController(cxt.store, cxt.sample_at)
    cxt.controller = controller
    return controller

#======= Axis calibration =====================================================

def set_axis_limit(cxt: CurrentContext, edge, value):
    """Best-effort edit of one axis bound; invalid edits leave limits unchanged."""
    return cxt.calibrator.set_limit(edge, value)


def reset_axes(cxt: CurrentContext):
    """Restore one logical unit per pixel for the loaded array."""
    if cxt.dataset is None:
        return cxt.limits
    return cxt.calibrator.reset(AxisLimits.for_shape(cxt.dataset.rows, cxt.dataset.cols))

#======= Annotation points ====================================================

def clear_points(cxt: CurrentContext):
    cxt.store.clear()
    if cxt.controller is not None:
        cxt.controller.reset()


def points_table(cxt: CurrentContext) -> list[dict]:
    """
    One row per point, in insertion order, for the points table.
    """
    rows = []
    for i, p in enumerate(cxt.store, start=1):
        rows.append({
            "#": i,
            "pixel": f"({p.pixel_x:.1f}, {p.pixel_y:.1f})",
            "x": f"{p.logical_x:.3f}",
            "y": f"{p.logical_y:.3f}",
            "value": f"{p.value:.6g}",
        })
    return rows


def legend_text(cxt: CurrentContext) -> str:
    """Status line shown under the image: loading, last error or data range."""
    if cxt.loading:
        return "Loading..."
    if cxt.error:
        return cxt.error
    if not cxt.has_raster:
        return "No array loaded"
    r = cxt.raster
    return f"{cxt.dataset.path.name}  {r.height} x {r.width}  min {r.vmin:.6g}  max {r.vmax:.6g}"
