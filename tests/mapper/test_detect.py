# -*- coding: utf-8 -*-
# File: test_detect.py

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
Testing the module mapper.detect
"""

from typing import List

from pytest import mark, raises

from tensorkit.mapper import DefaultMapper, NMSPrediction, filter_predictions


@mark.basic
def test_filter_predictions_single_class(cluster_predictions: List[NMSPrediction]) -> None:
    """
    Low scores are dropped before class agnostic nms
    """

    # Arrange
    mapper = filter_predictions(score_threshold=0.1, iou_threshold=0.5, max_total=6)

    # Act
    survivors = mapper(cluster_predictions)

    # Assert
    assert isinstance(mapper, DefaultMapper)
    assert survivors == [cluster_predictions[0], cluster_predictions[3], cluster_predictions[7]]


@mark.basic
def test_filter_predictions_multi_class(cluster_predictions: List[NMSPrediction]) -> None:
    """
    Boxes only suppress boxes of the same class
    """

    # Arrange
    mapper = filter_predictions(
        score_threshold=0.1, iou_threshold=0.5, max_total=3, multi_class=True, num_classes=2, max_per_class=2
    )

    # Act
    survivors = mapper(cluster_predictions)

    # Assert
    assert survivors == [cluster_predictions[0], cluster_predictions[4], cluster_predictions[3]]


@mark.basic
def test_filter_predictions_max_per_class_defaults_to_max_total(cluster_predictions: List[NMSPrediction]) -> None:
    """
    Without max_per_class every class may contribute up to max_total boxes
    """

    # Arrange
    mapper = filter_predictions(
        score_threshold=0.1, iou_threshold=0.5, max_total=10, multi_class=True, num_classes=2
    )

    # Act
    survivors = mapper(cluster_predictions)

    # Assert
    assert [prediction.score for prediction in survivors] == [0.95, 0.60, 0.85, 0.55]


@mark.basic
def test_filter_predictions_multi_class_requires_num_classes(cluster_predictions: List[NMSPrediction]) -> None:
    """
    num_classes must be passed for multi class filtering
    """

    # Arrange
    mapper = filter_predictions(score_threshold=0.1, iou_threshold=0.5, max_total=3, multi_class=True)

    # Act and Assert
    with raises(AssertionError):
        mapper(cluster_predictions)
