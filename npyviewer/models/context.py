"""
Tracks the active dataset context for the UI.

Holds the loaded ArrayDataset, the Raster derived from it, the axis calibration
and the annotation points, and swaps them together on every successful load.
"""

from dataclasses import dataclass, field
import logging
from typing import Any, Optional

from ..array_ops import Raster, sample_value
from ..config import con_dict  # live shared dict
from .annotations import AnnotationStore
from .axis_limits import AxisCalibrator, AxisLimits
from .dataset import ArrayDataset

logger = logging.getLogger(__name__)


def initial_limits() -> AxisLimits:
    """Limits shown before any file has been opened."""
    return AxisLimits(
        xmin=float(con_dict["initial_xmin"]),
        xmax=float(con_dict["initial_xmax"]),
        ymin=float(con_dict["initial_ymin"]),
        ymax=float(con_dict["initial_ymax"]),
    )


@dataclass
class CurrentContext:
    """
    Lightweight container for the application's current working state.

    Attributes
    ----------
    dataset : ArrayDataset | None
        The currently loaded array.
    raster : Raster | None
        Normalised image of ``dataset``; replaced together with it.
    calibrator : AxisCalibrator
        Current axis limits.
    store : AnnotationStore
        Points placed on the current raster.
    controller : Any
        Pointer state machine attached by the interface layer, reset on load.
    loading : bool
        True while a load is in flight.
    error : str | None
        Message from the last failed load.
    """

    _dataset: Optional[ArrayDataset] = None
    _raster: Optional[Raster] = None
    calibrator: AxisCalibrator = field(default_factory=lambda: AxisCalibrator(initial_limits()))
    controller: Any = None
    loading: bool = False
    error: str | None = None

    def __post_init__(self):
        self.store = AnnotationStore(lambda: self.calibrator.limits)
        # keep logical read-outs in step with the axes
        self.calibrator.add_listener(lambda _limits: self.store.recalibrate())

    #----- read-only access, swaps only happen through install()
    @property
    def dataset(self): return self._dataset

    @property
    def raster(self): return self._raster

    @property
    def limits(self) -> AxisLimits:
        return self.calibrator.limits

    # ------------------------------------------------------------------
    # convenience properties
    # ------------------------------------------------------------------
    @property
    def has_raster(self) -> bool:
        return self._raster is not None

    @property
    def metadata(self) -> dict | None:
        if self._dataset is None:
            return None
        meta = dict(self._dataset.metadata)
        meta["min"] = self._raster.vmin
        meta["max"] = self._raster.vmax
        meta["points"] = len(self.store)
        return meta

    def requires(self) -> tuple[bool, str]:
        """(ok, message) check used by actions that need an open array."""
        if not self.has_raster:
            return False, "No array loaded - open a .npy file first"
        return True, ""

    # ------------------------------------------------------------------
    # load lifecycle
    # ------------------------------------------------------------------
    def begin_load(self):
        self.loading = True
        self.error = None

    def finish_load(self):
        self.loading = False

    def fail_load(self, message: str):
        self.error = message

    def install(self, dataset: ArrayDataset, raster: Raster):
        """
        Swap in a freshly decoded dataset and its raster.

        Points are cleared before the new raster goes in; axes go back to one
        logical unit per pixel.
        """
        if (raster.height, raster.width) != dataset.shape:
            raise ValueError(f"Raster {raster.height}x{raster.width} does not match dataset {dataset.shape}")
        self.store.clear()
        self.store.resize(raster.width, raster.height)
        if self.controller is not None:
            self.controller.reset()
        self._dataset = dataset
        self._raster = raster
        self.calibrator.reset(AxisLimits.for_shape(dataset.rows, dataset.cols))
        logger.info(f"Installed {dataset.path.name} ({dataset.rows} x {dataset.cols})")

    def sample_at(self, px: float, py: float):
        """Raw value under a pixel position of the current dataset."""
        if self._dataset is None:
            return 0.0
        return sample_value(self._dataset.raw, px, py)
