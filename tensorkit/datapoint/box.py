# -*- coding: utf-8 -*-
# File: box.py

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
`Rect` class and intersection-over-union for axis-aligned rectangles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..utils.types import BoxArray, BoxCoordinate

__all__ = ["Rect", "rects_to_np_array", "area", "intersection", "np_iou", "iou"]


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle given by its upper left corner `(x, y)`, `width` and `height`.

    Note:
        Well-formed rectangles have non-negative width and height. Negative sizes are not normalized. Such a rectangle
        has `max_x < min_x` or `max_y < min_y`, so its intersection with any rectangle is 0 and so is its iou. Its
        `area` is not meaningful, e.g. `Rect(0, 0, -5, -5).area == 25`.
    """

    x: BoxCoordinate
    y: BoxCoordinate
    width: BoxCoordinate
    height: BoxCoordinate

    @property
    def min_x(self) -> BoxCoordinate:
        """min_x"""
        return self.x

    @property
    def min_y(self) -> BoxCoordinate:
        """min_y"""
        return self.y

    @property
    def max_x(self) -> BoxCoordinate:
        """max_x"""
        return self.x + self.width

    @property
    def max_y(self) -> BoxCoordinate:
        """max_y"""
        return self.y + self.height

    @property
    def area(self) -> BoxCoordinate:
        """area, computed from the corners"""
        return (self.max_x - self.min_x) * (self.max_y - self.min_y)

    def to_xyxy(self) -> list[BoxCoordinate]:
        """
        Returns:
            `[min_x, min_y, max_x, max_y]`
        """
        return [self.min_x, self.min_y, self.max_x, self.max_y]

    @classmethod
    def from_xyxy(cls, min_x: BoxCoordinate, min_y: BoxCoordinate, max_x: BoxCoordinate, max_y: BoxCoordinate) -> Rect:
        """Generate a `Rect` from its upper left and lower right corner"""
        return cls(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)

    def iou(self, other: Rect) -> float:
        """Intersection-over-union with another `Rect`. See `iou`."""
        return iou(self, other)


def rects_to_np_array(rects: Sequence[Rect]) -> BoxArray:
    """
    Stack rectangles to an array of shape `[N, 4]` in `xyxy` format.

    Args:
        rects: A sequence of `Rect`

    Returns:
        A `float64` array. Empty input gives an array of shape `[0, 4]`.
    """
    if not rects:
        return np.zeros((0, 4), dtype=np.float64)
    return np.array([rect.to_xyxy() for rect in rects], dtype=np.float64)


# adapted from https://github.com/tensorpack/tensorpack/blob/master/examples/FasterRCNN/utils/np_box_ops.py


def area(boxes: BoxArray) -> BoxArray:
    """
    Computes area of boxes.

    Args:
        boxes: numpy array with shape [N, 4] holding N boxes in xyxy format

    Returns:
        A numpy array with shape `[N]` representing box areas
    """
    return (boxes[:, 2] - boxes[:, 0]) * (boxes[:, 3] - boxes[:, 1])


def intersection(boxes1: BoxArray, boxes2: BoxArray) -> BoxArray:
    """
    Compute pairwise intersection areas between boxes.

    Args:
        boxes1: A `np.array` with shape `[N, 4]` holding `N` boxes in `xyxy` format
        boxes2: A `np.array` with shape `[M, 4]` holding `M` boxes in `xyxy` format

    Returns:
        A `np.array` with shape `[N, M]` representing pairwise intersection area
    """
    [x_min1, y_min1, x_max1, y_max1] = np.split(boxes1, 4, axis=1)  # pylint: disable=W0632
    [x_min2, y_min2, x_max2, y_max2] = np.split(boxes2, 4, axis=1)  # pylint: disable=W0632

    intersect_widths = np.maximum(
        0.0, np.minimum(x_max1, np.transpose(x_max2)) - np.maximum(x_min1, np.transpose(x_min2))
    )
    intersect_heights = np.maximum(
        0.0, np.minimum(y_max1, np.transpose(y_max2)) - np.maximum(y_min1, np.transpose(y_min2))
    )
    return intersect_widths * intersect_heights


def np_iou(boxes1: BoxArray, boxes2: BoxArray) -> BoxArray:
    """
    Computes pairwise intersection-over-union between box collections. Pairs where one box has a non-positive area
    get an iou of `0` without dividing.

    Args:
        boxes1: a numpy array with shape [N, 4] holding N boxes in xyxy format.
        boxes2: a numpy array with shape [M, 4] holding M boxes in xyxy format.

    Returns:
        A `np.array` with shape `[N, M]` representing pairwise iou scores.
    """
    intersect = intersection(boxes1, boxes2)
    area1 = np.expand_dims(area(boxes1), axis=1)
    area2 = np.expand_dims(area(boxes2), axis=0)
    union = area1 + area2 - intersect
    valid = (area1 > 0) & (area2 > 0)
    return np.where(valid, intersect / np.where(valid, union, 1.0), 0.0)


def iou(rect_a: Rect, rect_b: Rect) -> float:
    """
    Intersection-over-union of two rectangles.

    If one of the rectangles has a non-positive area the result is `0`. Otherwise it is
    `intersection / (area_a + area_b - intersection)`.

    Example:
        ```python
        iou(Rect(0, 0, 10, 10), Rect(0, 0, 10, 10))  # 1.0
        iou(Rect(0, 0, 10, 10), Rect(20, 20, 5, 5))  # 0.0
        ```
    """
    area_a = rect_a.area
    if area_a <= 0:
        return 0.0
    area_b = rect_b.area
    if area_b <= 0:
        return 0.0

    intersection_width = max(min(rect_a.max_x, rect_b.max_x) - max(rect_a.min_x, rect_b.min_x), 0)
    intersection_height = max(min(rect_a.max_y, rect_b.max_y) - max(rect_a.min_y, rect_b.min_y), 0)
    intersection_area = intersection_width * intersection_height
    return float(intersection_area / (area_a + area_b - intersection_area))
