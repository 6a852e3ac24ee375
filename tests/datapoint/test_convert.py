# -*- coding: utf-8 -*-
# File: test_convert.py

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
Testing the module datapoint.convert
"""

import numpy as np
from numpy.testing import assert_array_equal
from pytest import mark

from tensorkit.datapoint import StridedArrayView, pixel_buffer_to_pil, scale_to_uint8, view_to_pil_image
from tensorkit.datapoint.convert import PixelBuffer
from tensorkit.utils.settings import PixelMode


@mark.basic
def test_scale_to_uint8() -> None:
    """
    Offset is added before scaling, results are clamped and truncated
    """

    # Arrange
    values = np.array([[-1.0, 0.0], [0.5, 1.0]], dtype=np.float32)

    # Act
    pixels = scale_to_uint8(values, offset=1, scale=127.5)

    # Assert
    assert pixels.dtype == np.uint8
    assert_array_equal(pixels, np.array([[0, 127], [191, 255]], dtype=np.uint8))


@mark.basic
def test_scale_to_uint8_casts_offset_and_scale_for_integers() -> None:
    """
    Fractional offset and scale are truncated for integer values
    """

    # Arrange
    values = np.array([1, 2, 3], dtype=np.int32)

    # Act
    pixels = scale_to_uint8(values, offset=0.9, scale=2.5)

    # Assert
    assert_array_equal(pixels, np.array([2, 4, 6], dtype=np.uint8))


@mark.basic
def test_scale_to_uint8_clamps_large_integers() -> None:
    """
    Large int32 values are clamped to 255 instead of wrapping around
    """

    # Arrange
    values = np.array([2**30, 100, -(2**30), 2**31 - 1], dtype=np.int32)

    # Act
    pixels = scale_to_uint8(values, offset=0, scale=4)

    # Assert
    assert_array_equal(pixels, np.array([255, 255, 0, 255], dtype=np.uint8))


@mark.basic
def test_to_gray_bytes_of_large_integers() -> None:
    """
    A large positive value in an int32 view gives a white pixel
    """

    # Arrange
    view = StridedArrayView.wrap(np.array([2**30, 100], dtype=np.int32), [1, 2])

    # Act
    buffer = view.to_gray_bytes(offset=0, scale=4)

    # Assert
    assert_array_equal(buffer.data, np.array([255, 255], dtype=np.uint8))


@mark.basic
def test_pixel_buffer_tobytes() -> None:
    """
    tobytes returns the raw data
    """

    # Arrange
    buffer = PixelBuffer(np.array([1, 2, 3, 4], dtype=np.uint8), 2, 2, PixelMode.GRAY)

    # Assert
    assert buffer.tobytes() == b"\x01\x02\x03\x04"


@mark.basic
def test_pixel_buffer_to_pil() -> None:
    """
    An RGBA buffer becomes an RGBA image with identical bytes
    """

    # Arrange
    view = StridedArrayView.wrap(np.arange(18, dtype=np.float32), [3, 2, 3])
    buffer = view.to_rgba_bytes(scale=10)

    # Act
    image = pixel_buffer_to_pil(buffer)

    # Assert
    assert image.mode == "RGBA"
    assert image.size == (3, 2)
    assert image.tobytes() == buffer.tobytes()
    assert image.getpixel((1, 0)) == (10, 70, 130, 255)


@mark.basic
def test_view_to_pil_image() -> None:
    """
    Rank 2 views and single channels become grayscale images
    """

    # Arrange
    gray = StridedArrayView.wrap(np.array([0.0, 0.25, 0.5, 1.0]), [2, 2])
    channels = StridedArrayView.wrap(np.arange(12, dtype=np.int32), [3, 2, 2])

    # Act
    gray_image = view_to_pil_image(gray, scale=255)
    channel_image = view_to_pil_image(channels, channel=2)

    # Assert
    assert gray_image.mode == "L"
    assert gray_image.tobytes() == bytes([0, 63, 127, 255])
    assert channel_image.mode == "L"
    assert channel_image.size == (2, 2)
    assert channel_image.tobytes() == bytes([8, 9, 10, 11])
