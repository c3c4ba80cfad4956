"""
Decoding of a single .npy file into an immutable 2-D sample buffer.
"""

from dataclasses import dataclass, field
import logging
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)

SUPPORTED_EXTS = ('.npy',)
# signed int, unsigned int, float
SUPPORTED_KINDS = ('i', 'u', 'f')


class DecodeError(ValueError):
    """Raised when a file cannot be read as a 2-D numeric array."""


@dataclass
class ArrayDataset:
    """
    Lightweight wrapper for one decoded array file.

    Parameters
    ----------
    path : Path
        Full filesystem path the array was read from.
    data : numpy.ndarray
        The decoded samples. Stored as a read-only, C-contiguous float64
        copy so nothing downstream can mutate it and no file handle is kept.

    Attributes
    ----------
    source_dtype : str
        dtype recorded in the file header, kept for the info table.
    raw : numpy.ndarray
        Read-only copy in the file's own dtype. Point values are read from
        here so 64-bit integers above 2**53 are not rounded by the float64
        conversion.

    Notes
    -----
    Layout is row-major: the sample at row ``r``, column ``c`` sits at flat
    index ``r * cols + c``.
    """
    path: Path
    data: np.ndarray
    source_dtype: str = field(default="float64")
    raw: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        self.path = Path(self.path)
        src = np.array(self.data, order='C', copy=True)
        src.setflags(write=False)
        self.raw = src
        arr = src.astype(np.float64)
        arr.setflags(write=False)
        self.data = arr

    @classmethod
    def from_path(cls, path):
        """
        Decode ``path`` with NumPy.

        Raises
        ------
        DecodeError
            If the file is missing, is not a .npy file, has a malformed
            header, is not 2-D, holds a non-numeric dtype or is empty.
        """
        p = Path(path)
        if not p.is_file():
            raise DecodeError(f"{p} is not a file")
        if p.suffix.lower() not in SUPPORTED_EXTS:
            raise DecodeError(f"Cannot open {p.suffix}, this is an invalid file type")

        try:
            # pickled object arrays are never accepted
            raw = np.load(p, allow_pickle=False)
        except (ValueError, OSError, EOFError) as e:
            raise DecodeError(f"Failed to read {p.name}: {e}") from e

        if not isinstance(raw, np.ndarray):
            raise DecodeError(f"{p.name} does not contain a single array")
        if raw.dtype.kind not in SUPPORTED_KINDS:
            raise DecodeError(f"Unsupported dtype {raw.dtype} in {p.name}")
        if raw.ndim != 2:
            raise DecodeError(f"Expected a 2-D array in {p.name}; got shape {raw.shape}")
        if raw.size == 0:
            raise DecodeError(f"{p.name} contains an empty array {raw.shape}")

        logger.debug(f"Decoded {p.name}: shape {raw.shape}, dtype {raw.dtype}")
        return cls(path=p, data=raw, source_dtype=str(raw.dtype))

    @property
    def rows(self) -> int:
        return int(self.data.shape[0])

    @property
    def cols(self) -> int:
        return int(self.data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def flat(self) -> np.ndarray:
        """Row-major, read-only view of the samples."""
        return self.data.reshape(-1)

    @property
    def metadata(self) -> dict:
        return {
            "file": self.path.name,
            "shape": f"{self.rows} x {self.cols}",
            "dtype": self.source_dtype,
        }
