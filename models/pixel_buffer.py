"""Owned, bounds-checked RGB pixel grid."""

import numpy as np
from typing import Literal, Sequence, Tuple

from models.errors import InvalidArgumentError, OutOfBoundsError


class PixelBuffer:
    """
    width x height grid of 3-channel samples in [0, 255].

    Samples are stored as a (height, width, 3) uint8 array that no other
    buffer shares. Computed float data enters through `from_values`, which
    is the only place rounding and clamping happen.
    """

    __slots__ = ('_data',)

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise InvalidArgumentError(f"Buffer dimensions must be >= 1, got {width}x{height}")
        self._data = np.zeros((height, width, 3), dtype=np.uint8)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> 'PixelBuffer':
        buffer = cls.__new__(cls)
        buffer._data = data
        return buffer

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'PixelBuffer':
        """Copy an integer (H, W, 3) array; values must already be in range.

        Float data goes through `from_values`, which rounds and clamps.
        """
        array = np.asarray(array)
        if not (np.issubdtype(array.dtype, np.integer) or array.dtype == np.bool_):
            raise InvalidArgumentError(
                f"Expected an integer array, got dtype {array.dtype}; use from_values"
            )
        if array.ndim != 3 or array.shape[2] != 3 or array.shape[0] < 1 or array.shape[1] < 1:
            raise InvalidArgumentError(f"Expected (H, W, 3) array, got shape {array.shape}")
        if array.size and (array.min() < 0 or array.max() > 255):
            raise InvalidArgumentError("RGB values must be in the range 0-255")
        return cls._wrap(array.astype(np.uint8, copy=True))

    @classmethod
    def from_values(
        cls,
        values: np.ndarray,
        rounding: Literal['round', 'floor'] = 'round'
    ) -> 'PixelBuffer':
        """Round and clamp arbitrary numeric (H, W, 3) data into a new buffer."""
        values = np.asarray(values, dtype=np.float64)
        if values.ndim != 3 or values.shape[2] != 3:
            raise InvalidArgumentError(f"Expected (H, W, 3) array, got shape {values.shape}")
        if rounding == 'round':
            values = np.rint(values)
        elif rounding == 'floor':
            values = np.floor(values)
        else:
            raise InvalidArgumentError(f"Unknown rounding mode: {rounding}")
        return cls._wrap(np.clip(values, 0, 255).astype(np.uint8))

    @classmethod
    def filled(cls, width: int, height: int, rgb: Sequence[int]) -> 'PixelBuffer':
        buffer = cls(width, height)
        buffer._data[:, :] = np.clip(np.asarray(rgb, dtype=np.int64), 0, 255)
        return buffer

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), numpy order."""
        return self._data.shape[:2]

    @property
    def samples(self) -> np.ndarray:
        """Read-only view of the (H, W, 3) sample array."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def as_float(self) -> np.ndarray:
        return self._data.astype(np.float64)

    def copy(self) -> 'PixelBuffer':
        return PixelBuffer._wrap(self._data.copy())

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer"
            )

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        self._check_bounds(x, y)
        r, g, b = self._data[y, x]
        return int(r), int(g), int(b)

    def set_pixel(self, x: int, y: int, rgb: Sequence[int]) -> None:
        """Write one pixel, clamping each value into [0, 255]."""
        self._check_bounds(x, y)
        if len(rgb) != 3:
            raise InvalidArgumentError(f"Expected 3 channel values, got {len(rgb)}")
        self._data[y, x] = [min(255, max(0, int(v))) for v in rgb]

    def same_size(self, other: 'PixelBuffer') -> bool:
        return self.shape == other.shape

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.same_size(other) and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height})"
