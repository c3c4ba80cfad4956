"""
NpyViewer npyviewer.models package.

Core data structures for a single loaded array and the annotations drawn on it.

Classes
-------
ArrayDataset
    Immutable 2-D sample buffer decoded from a .npy file.
AxisLimits, AxisCalibrator
    Logical axis bounds over the raster and the validated editor for them.
AnnotationPoint, AnnotationStore
    Labelled points in pixel and logical coordinates, with nearest-point
    hit-testing.
CurrentContext
    Owner of everything above for the current session; swaps dataset, raster
    and points together on each successful load.

Notes
-----
Nothing in this package depends on Qt. Decoding is delegated to NumPy and
failures are surfaced as DecodeError.
"""

from .annotations import AnnotationPoint, AnnotationStore
from .axis_limits import AxisCalibrator, AxisLimits
from .context import CurrentContext
from .dataset import ArrayDataset, DecodeError

__all__ = [
    "ArrayDataset",
    "DecodeError",
    "AxisLimits",
    "AxisCalibrator",
    "AnnotationPoint",
    "AnnotationStore",
    "CurrentContext",
]
