# -*- coding: utf-8 -*-
# File: test_box.py

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
Testing the module datapoint.box
"""

import numpy as np
from numpy.testing import assert_almost_equal, assert_array_equal
from pytest import mark

from tensorkit.datapoint import Rect, intersection, iou, np_iou, rects_to_np_array


class TestRect:
    """
    Testing Rect properties
    """

    @staticmethod
    @mark.basic
    def test_corners_and_area() -> None:
        """
        Corners and area are derived from origin and size
        """

        # Arrange
        rect = Rect(x=1, y=2, width=3, height=4)

        # Assert
        assert (rect.min_x, rect.min_y, rect.max_x, rect.max_y) == (1, 2, 4, 6)
        assert rect.area == 12
        assert rect.to_xyxy() == [1, 2, 4, 6]
        assert Rect.from_xyxy(1, 2, 4, 6) == rect

    @staticmethod
    @mark.basic
    def test_negative_size_is_not_normalized() -> None:
        """
        Negative sizes are kept as they are and never overlap anything, even if the area is positive
        """

        # Arrange
        rect = Rect(0, 0, 10, 10)

        # Assert
        assert Rect(0, 0, -5, 10).area == -50
        assert Rect(0, 0, 0, 10).area == 0
        assert Rect(0, 0, -5, -5).area == 25
        assert iou(rect, Rect(0, 0, -5, -5)) == 0.0
        assert iou(Rect(5, 5, -5, -5), rect) == 0.0
        assert_array_equal(
            np_iou(rects_to_np_array([rect]), rects_to_np_array([Rect(0, 0, -5, -5), Rect(5, 5, -5, -5)])),
            np.zeros((1, 2)),
        )


@mark.basic
def test_iou_boundaries() -> None:
    """
    Identical rectangles give 1, disjoint or degenerated rectangles give 0
    """

    # Arrange
    rect = Rect(0, 0, 10, 10)

    # Assert
    assert iou(rect, Rect(0, 0, 10, 10)) == 1.0
    assert iou(rect, Rect(20, 20, 5, 5)) == 0.0
    assert iou(rect, Rect(10, 0, 10, 10)) == 0.0
    assert iou(rect, Rect(2, 2, 0, 5)) == 0.0
    assert iou(Rect(2, 2, 0, 5), rect) == 0.0
    assert iou(rect, Rect(0, 0, -5, -5)) == 0.0
    assert iou(Rect(3, 3, 0, 0), Rect(3, 3, 0, 0)) == 0.0


@mark.basic
def test_iou_partial_overlap() -> None:
    """
    iou is intersection over union and symmetric
    """

    # Arrange
    rect_a = Rect(0, 0, 10, 10)
    rect_b = Rect(5, 0, 10, 10)

    # Assert
    assert_almost_equal(iou(rect_a, rect_b), 1 / 3)
    assert_almost_equal(rect_b.iou(rect_a), 1 / 3)
    assert_almost_equal(iou(Rect(0, 0, 10, 10), Rect(1, 1, 10, 10)), 81 / 119)
    assert iou(Rect(0, 0, 10, 10), Rect(0, 0, 10, 5)) == 0.5


@mark.basic
def test_rects_to_np_array() -> None:
    """
    Rectangles are stacked in xyxy format
    """

    # Act
    boxes = rects_to_np_array([Rect(0, 0, 10, 10), Rect(1, 2, 3, 4)])
    empty = rects_to_np_array([])

    # Assert
    assert boxes.dtype == np.float64
    assert_array_equal(boxes, np.array([[0, 0, 10, 10], [1, 2, 4, 6]]))
    assert empty.shape == (0, 4)


@mark.basic
def test_np_iou_matches_iou() -> None:
    """
    Pairwise iou of box arrays agrees with the iou of single rectangles
    """

    # Arrange
    rects_a = [Rect(0, 0, 10, 10), Rect(5, 5, 10, 10), Rect(3, 3, 0, 4)]
    rects_b = [Rect(1, 1, 10, 10), Rect(50, 50, 10, 10), Rect(0, 0, 10, 10), Rect(0, 0, -2, 3)]

    # Act
    ious = np_iou(rects_to_np_array(rects_a), rects_to_np_array(rects_b))

    # Assert
    assert ious.shape == (3, 4)
    expected = np.array([[iou(rect_a, rect_b) for rect_b in rects_b] for rect_a in rects_a])
    assert_almost_equal(ious, expected)
    assert_array_equal(ious[2], np.zeros(4))
    assert_array_equal(ious[:, 3], np.zeros(3))


@mark.basic
def test_intersection() -> None:
    """
    Pairwise intersection areas
    """

    # Arrange
    boxes1 = np.array([[0, 0, 10, 10]], dtype=np.float64)
    boxes2 = np.array([[5, 5, 15, 15], [20, 20, 30, 30]], dtype=np.float64)

    # Act
    areas = intersection(boxes1, boxes2)

    # Assert
    assert_array_equal(areas, np.array([[25.0, 0.0]]))
