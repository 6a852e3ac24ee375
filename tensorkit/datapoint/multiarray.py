# -*- coding: utf-8 -*-
# File: multiarray.py

# Copyright 2025 Dr. Janis Meyer. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
`StridedArrayView`: a multi-dimensional view with explicit shape and strides over a flat, shared buffer.

A model returns its output as a flat tensor with a known shape, e.g. `[3, height, width]`. `StridedArrayView` lets
you index into that buffer, reinterpret it with `transposed` and `reshaped` without copying, and finally convert it
into pixel bytes.

Example:
    ```python
    view = StridedArrayView.wrap(model_output, [3, 256, 256])
    rgba = view.to_rgba_bytes(offset=1, scale=127.5)
    ```

Info:
    Views derived with `transposed` or `reshaped` share the storage with the view they come from. Writing through one
    view is visible through all others. Views are not synchronized: mutating aliased views from several threads
    requires locking on the caller side.
"""
from __future__ import annotations

from math import prod
from typing import Any, Optional, Union

import numpy as np
import numpy.typing as npt

from ..utils.error import InvalidChannelError, RankMismatchError, ShapeMismatchError
from ..utils.logger import LoggingRecord, logger
from ..utils.settings import DataType, PixelMode, TypeOrStr, get_data_type
from ..utils.types import Element, Shape, ShapeLike, Storage, Strides
from .convert import PixelBuffer, scale_to_uint8

__all__ = ["StridedArrayView", "row_major_strides"]

# number of values per line in `describe`
_VALUES_PER_LINE = 11


def row_major_strides(shape: ShapeLike) -> Strides:
    """
    Strides of a row-major layout: the last dimension varies fastest.

    Example:
        ```python
        row_major_strides([1, 1, 48, 17, 27])  # (22032, 22032, 459, 27, 1)
        ```

    Args:
        shape: Dimension sizes

    Returns:
        Element strides with `strides[-1] == 1` and `strides[i] == strides[i + 1] * shape[i + 1]`
    """
    strides = [1] * len(shape)
    for idx in range(len(shape) - 1, 0, -1):
        strides[idx - 1] = strides[idx] * shape[idx]
    return tuple(strides)


class StridedArrayView:
    """
    Multi-dimensional view over a flat `numpy` buffer.

    The flat offset of an index tuple is `sum(indices[i] * strides[i])`. Views created from a shape have row-major
    strides. `transposed` permutes shape and strides, `reshaped` computes fresh row-major strides. Both return new
    views over the same storage.

    Element types are limited to `float32`, `float64` and `int32`.

    Note:
        Bounds of single dimensions are not checked on element access. Only the resulting flat offset must lie within
        the storage, otherwise an `IndexError` is raised. The extent of the view is checked when the view is created.
    """

    def __init__(self, storage: Storage, shape: ShapeLike, strides: Optional[ShapeLike] = None) -> None:
        """
        Args:
            storage: A numpy array of a supported element type. Multi-dimensional C-contiguous arrays are flattened
                     without copying.
            shape: Dimension sizes. At least one dimension is required.
            strides: Element strides, one per dimension. Row-major strides will be used if `None`.

        Raises:
            DataTypeError: If the element type of `storage` is not supported.
            ValueError: If shape or strides are malformed.
            IndexError: If the view reaches beyond the storage.
        """
        storage = np.asarray(storage)
        if storage.ndim != 1:
            if not storage.flags.c_contiguous:
                raise ValueError("Only C-contiguous arrays can be flattened without copying. Use from_numpy instead")
            storage = storage.reshape(-1)
        self._data_type = get_data_type(storage.dtype)

        self.shape: Shape = tuple(int(size) for size in shape)
        if not self.shape:
            raise ValueError("A view requires at least one dimension")
        if any(size < 0 for size in self.shape):
            raise ValueError(f"Dimension sizes must be non-negative, got {list(self.shape)}")
        self.strides: Strides = (
            row_major_strides(self.shape) if strides is None else tuple(int(stride) for stride in strides)
        )
        if len(self.strides) != len(self.shape):
            raise ValueError(f"strides {list(self.strides)} do not match shape {list(self.shape)}")

        self.storage = storage
        self._check_extent()

    @classmethod
    def wrap(cls, buffer: Storage, shape: ShapeLike, strides: Optional[ShapeLike] = None) -> StridedArrayView:
        """
        Zero-copy view over a caller-owned buffer. The caller keeps ownership: the view will never reallocate the
        buffer.

        Args:
            buffer: Flat numpy array
            shape: Dimension sizes
            strides: Element strides. Row-major if `None`.

        Returns:
            A `StridedArrayView` sharing `buffer`
        """
        return cls(buffer, shape, strides)

    @classmethod
    def zeros(cls, shape: ShapeLike, dtype: Union[TypeOrStr, npt.DTypeLike] = DataType.FLOAT32) -> StridedArrayView:
        """
        A view over a new zero-initialized buffer of `prod(shape)` elements.
        """
        return cls(np.zeros(prod(shape), dtype=get_data_type(dtype).np_dtype), shape)

    @classmethod
    def full(
        cls, shape: ShapeLike, fill_value: Element, dtype: Union[TypeOrStr, npt.DTypeLike] = DataType.FLOAT32
    ) -> StridedArrayView:
        """
        A view over a new buffer of `prod(shape)` elements, all set to `fill_value`.
        """
        return cls(np.full(prod(shape), fill_value, dtype=get_data_type(dtype).np_dtype), shape)

    @classmethod
    def from_numpy(cls, array: npt.NDArray[Any]) -> StridedArrayView:
        """
        Wrap a numpy array, keeping its shape. C-contiguous arrays are wrapped without copying, all others are copied
        to a C-contiguous buffer first.

        Args:
            array: Array with at least one dimension

        Returns:
            A `StridedArrayView` with row-major strides
        """
        array = np.asarray(array)
        if not array.flags.c_contiguous:
            logger.warning(
                LoggingRecord(
                    "Array is not C-contiguous and will be copied",
                    {"shape": list(array.shape), "strides": list(array.strides)},
                )
            )
            array = np.ascontiguousarray(array)
        return cls(array.reshape(-1), array.shape)

    def _check_extent(self) -> None:
        if self.element_count() == 0:
            return
        low = sum((size - 1) * stride for size, stride in zip(self.shape, self.strides) if stride < 0)
        high = sum((size - 1) * stride for size, stride in zip(self.shape, self.strides) if stride > 0)
        if low < 0 or high >= self.storage.size:
            raise IndexError(
                f"View with shape {list(self.shape)} and strides {list(self.strides)} exceeds storage of "
                f"{self.storage.size} elements"
            )

    @property
    def rank(self) -> int:
        """Number of dimensions"""
        return len(self.shape)

    @property
    def dtype(self) -> DataType:
        """Element type"""
        return self._data_type

    def element_count(self) -> int:
        """
        Returns:
            `prod(shape)`
        """
        return prod(self.shape)

    def flat_offset(self, indices: ShapeLike) -> int:
        """
        Storage offset of an index tuple: `sum(indices[i] * strides[i])`.

        Raises:
            IndexError: If the number of indices differs from the rank.
        """
        if len(indices) != self.rank:
            raise IndexError(f"Expected {self.rank} indices, got {len(indices)}")
        offset = 0
        for index, stride in zip(indices, self.strides):
            offset += int(index) * stride
        if not 0 <= offset < self.storage.size:
            raise IndexError(f"Indices {list(indices)} give offset {offset} outside of storage")
        return offset

    def get_at(self, indices: ShapeLike) -> Element:
        """Read the element at a sequence of indices"""
        return self.storage[self.flat_offset(indices)]

    def set_at(self, indices: ShapeLike, value: Element) -> None:
        """Write the element at a sequence of indices"""
        self.storage[self.flat_offset(indices)] = value

    def get(self, *indices: int) -> Element:
        """
        Read a single element, e.g. `view.get(1, 2, 0)`.
        """
        return self.get_at(indices)

    def set(self, *indices_and_value: Element) -> None:
        """
        Write a single element. The last argument is the value, e.g. `view.set(1, 2, 0, 3.14)`.
        """
        *indices, value = indices_and_value
        self.set_at(indices, value)  # type: ignore

    def __getitem__(self, key: Union[int, tuple[int, ...]]) -> Element:
        return self.get_at(key if isinstance(key, tuple) else (key,))

    def __setitem__(self, key: Union[int, tuple[int, ...]], value: Element) -> None:
        self.set_at(key if isinstance(key, tuple) else (key,), value)

    def transposed(self, order: ShapeLike) -> StridedArrayView:
        """
        Permute the dimensions. The new view uses the same storage.

        Example:
            ```python
            view = StridedArrayView.wrap(np.arange(6, dtype=np.float32), [2, 3])
            transposed = view.transposed([1, 0])  # shape (3, 2), transposed[i, j] == view[j, i]
            ```

        Args:
            order: A permutation of `range(rank)`. Dimension `i` of the new view is dimension `order[i]` of this view.

        Returns:
            A `StridedArrayView` aliasing this view
        """
        order = tuple(order)
        if sorted(order) != list(range(self.rank)):
            raise ValueError(f"order {list(order)} is not a permutation of {list(range(self.rank))}")
        shape = tuple(self.shape[dim] for dim in order)
        strides = tuple(self.strides[dim] for dim in order)
        return StridedArrayView(self.storage, shape, strides)

    def reshaped(self, new_shape: ShapeLike) -> StridedArrayView:
        """
        Change the number and sizes of dimensions. The new view uses the same storage and row-major strides.

        Warning:
            The storage is reinterpreted in its own order. After a `transposed` the result is only meaningful if the
            transposed view happens to be contiguous in row-major order. This is not checked.

        Args:
            new_shape: Dimension sizes with the same product as the current shape.

        Returns:
            A `StridedArrayView` aliasing this view

        Raises:
            ShapeMismatchError: If the number of elements differs.
        """
        new_shape = tuple(int(size) for size in new_shape)
        if prod(new_shape) != self.element_count():
            raise ShapeMismatchError(self.shape, new_shape)
        return StridedArrayView(self.storage, new_shape)

    def as_ndarray(self) -> npt.NDArray[Any]:
        """
        Zero-copy numpy representation honouring shape and strides. Writing into the returned array writes into the
        storage.
        """
        step = self.storage.strides[0]
        return np.lib.stride_tricks.as_strided(
            self.storage, shape=self.shape, strides=tuple(stride * step for stride in self.strides)
        )

    def to_rgba_bytes(self, offset: Element = 0, scale: Element = 1) -> PixelBuffer:
        """
        Converts a view of shape `[3, height, width]` into RGBA bytes. Every value is mapped to
        `clamp((value + offset) * scale, 0, 255)`, alpha is always 255.

        Raises:
            RankMismatchError: If the view does not have three dimensions.
            InvalidChannelError: If the first dimension is not 3.
        """
        if self.rank != 3:
            raise RankMismatchError(self.shape, 3)
        if self.shape[0] != 3:
            raise InvalidChannelError(f"Expected first dimension to have 3 channels, got {self.shape[0]}")

        _, height, width = self.shape
        pixels = np.full((height, width, 4), 255, dtype=np.uint8)
        pixels[:, :, :3] = np.moveaxis(scale_to_uint8(self.as_ndarray(), offset, scale), 0, -1)
        return PixelBuffer(pixels.reshape(-1), width, height, PixelMode.RGBA)

    def to_gray_bytes(self, offset: Element = 0, scale: Element = 1) -> PixelBuffer:
        """
        Converts a view of shape `[height, width]` into grayscale bytes, one byte per value.

        Raises:
            RankMismatchError: If the view does not have two dimensions.
        """
        if self.rank != 2:
            raise RankMismatchError(self.shape, 2)

        height, width = self.shape
        pixels = scale_to_uint8(self.as_ndarray(), offset, scale)
        return PixelBuffer(pixels.reshape(-1), width, height, PixelMode.GRAY)

    def to_pixel_bytes(self, offset: Element = 0, scale: Element = 1) -> PixelBuffer:
        """
        RGBA bytes for views of rank 3, grayscale bytes for views of rank 2.
        """
        if self.rank == 3:
            return self.to_rgba_bytes(offset, scale)
        if self.rank == 2:
            return self.to_gray_bytes(offset, scale)
        raise RankMismatchError(self.shape, 2, 3)

    def extract_channel(self, channel_index: int) -> StridedArrayView:
        """
        Copies one channel of a view with shape `[channels, height, width]`.

        Args:
            channel_index: `0 <= channel_index < channels`

        Returns:
            A new view of shape `[height, width]` with its own storage

        Raises:
            RankMismatchError: If the view does not have three dimensions.
            InvalidChannelError: If the channel does not exist.
        """
        if self.rank != 3:
            raise RankMismatchError(self.shape, 3)
        if not 0 <= channel_index < self.shape[0]:
            raise InvalidChannelError(f"Channel must be between 0 and {self.shape[0] - 1}, got {channel_index}")

        channel = self.as_ndarray()[channel_index].copy()
        return StridedArrayView(channel.reshape(-1), channel.shape)

    def channel_to_gray_bytes(self, channel_index: int, offset: Element = 0, scale: Element = 1) -> PixelBuffer:
        """Grayscale bytes of a single channel. See `extract_channel`."""
        return self.extract_channel(channel_index).to_gray_bytes(offset, scale)

    def describe(self) -> str:
        """
        Nested, bracketed rendering of all values following the shape of the view. Long rows are wrapped after every
        11th value.
        """
        return self._describe([])

    def _describe(self, indices: list[int]) -> str:
        indices = indices + [0]
        dim = len(indices) - 1
        size = self.shape[dim]

        out = "["
        if len(indices) < self.rank:
            rows = []
            for idx in range(size):
                indices[dim] = idx
                rows.append(self._describe(indices))
            out += (",\n" + " " * (dim + 1)).join(rows)
        else:
            out += " "
            for idx in range(size):
                indices[dim] = idx
                out += str(self.get_at(indices))
                if idx != size - 1:
                    out += ", "
                    if idx % _VALUES_PER_LINE == _VALUES_PER_LINE - 1:
                        out += "\n " + " " * (dim + 1)
            out += " "
        return out + "]"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"StridedArrayView(shape={list(self.shape)}, strides={list(self.strides)}, dtype={self.dtype.value})"
