# -*- coding: utf-8 -*-
# File: convert.py

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
Conversion of view values to pixel bytes and handing pixel bytes over to Pillow
"""
from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple, Optional

import numpy as np
import numpy.typing as npt
from lazy_imports import try_import

from ..utils.error import DependencyError
from ..utils.file_utils import get_pillow_requirement, pillow_available
from ..utils.logger import log_once
from ..utils.settings import PixelMode
from ..utils.types import Element, PixelValues

with try_import() as import_guard:
    from PIL import Image

if TYPE_CHECKING:
    from .multiarray import StridedArrayView

__all__ = ["PixelBuffer", "scale_to_uint8", "pixel_buffer_to_pil", "view_to_pil_image"]


class PixelBuffer(NamedTuple):
    """
    Flat byte buffer in row-major order, top-to-bottom and left-to-right.

    Attributes:
        data: `uint8` array of `height * width * 4` bytes (`RGBA`) or `height * width` bytes (`L`)
        width: Image width
        height: Image height
        mode: `PixelMode.RGBA` or `PixelMode.GRAY`
    """

    data: PixelValues
    width: int
    height: int
    mode: PixelMode

    def tobytes(self) -> bytes:
        """The raw bytes"""
        return self.data.tobytes()


def scale_to_uint8(values: npt.NDArray, offset: Element, scale: Element) -> PixelValues:  # type: ignore
    """
    Maps values to bytes by `clamp((value + offset) * scale, 0, 255)` and truncating to `uint8`.

    `offset` and `scale` are cast to the element type of `values` first. For integer arrays fractional parts of
    `offset` and `scale` are therefore dropped. The transform itself is computed in `float64`, large values
    are clamped to 255 instead of overflowing.

    Note:
        `NaN` values give undefined bytes.

    Args:
        values: Array of any shape.
        offset: Added first.
        scale: Multiplied after adding the offset.

    Returns:
        `uint8` array with the shape of `values`.
    """
    element_type = values.dtype.type
    typed_offset, typed_scale = element_type(offset), element_type(scale)
    if values.dtype.kind == "i" and (typed_offset != offset or typed_scale != scale):
        log_once(
            f"offset {offset} and scale {scale} are cast to {values.dtype.name} as {typed_offset} and {typed_scale}",
            "warning",
        )
    # float64 holds every int32 sum exactly and cannot wrap around before clipping
    scaled = (values.astype(np.float64) + np.float64(typed_offset)) * np.float64(typed_scale)
    return np.clip(scaled, 0, 255).astype(np.uint8)


def pixel_buffer_to_pil(buffer: PixelBuffer) -> Image.Image:
    """
    Generate a `PIL.Image.Image` from a `PixelBuffer`. The image holds its own copy of the bytes.

    Raises:
        DependencyError: If Pillow is not installed.
    """
    if not pillow_available():
        raise DependencyError(get_pillow_requirement()[2])
    return Image.frombytes(buffer.mode.value, (buffer.width, buffer.height), buffer.tobytes())


def view_to_pil_image(
    view: StridedArrayView, offset: Element = 0, scale: Element = 1, channel: Optional[int] = None
) -> Image.Image:
    """
    Converts a view to a Pillow image.

    Use `offset` and `scale` to put the values in the range `[0, 255]`. If the range of the data is `[0, 1)`, use
    `offset=0` and `scale=255`. If the range is `[-1, 1]`, use `offset=1` and `scale=127.5`.

    Args:
        view: A view of shape `[3, height, width]` or `[height, width]`, or `[channels, height, width]` if `channel` is
              given.
        offset: Added first.
        scale: Multiplied after adding the offset.
        channel: If set, only this channel is converted to a grayscale image.

    Returns:
        An `RGBA` or `L` image
    """
    if channel is not None:
        return pixel_buffer_to_pil(view.channel_to_gray_bytes(channel, offset, scale))
    return pixel_buffer_to_pil(view.to_pixel_bytes(offset, scale))
