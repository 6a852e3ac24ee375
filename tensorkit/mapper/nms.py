# -*- coding: utf-8 -*-
# File: nms.py

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
Module for NMS (Non-Maximum Suppression) on scored and categorized rectangles.

Both functions return indices into the given sequence of predictions. They only read their input. Predictions are
expected to be well-formed: `NaN` scores or negative rectangle sizes give undefined (but memory safe) results.
"""
from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

import numpy as np

from ..datapoint.box import Rect, np_iou, rects_to_np_array

__all__ = ["NMSPrediction", "nms", "multi_class_nms"]


class NMSPrediction(NamedTuple):
    """
    A single detection: category, confidence and box.
    """

    class_index: int
    score: float
    rect: Rect


def _sort_by_score(predictions: Sequence[NMSPrediction], indices: Sequence[int]) -> list[int]:
    # sorted is stable, ties keep their relative order
    return sorted(indices, key=lambda idx: predictions[idx].score, reverse=True)


def nms(
    predictions: Sequence[NMSPrediction],
    iou_threshold: float,
    max_selected: int,
    indices: Optional[Sequence[int]] = None,
) -> list[int]:
    """
    Removes boxes that overlap too much with other boxes of higher score. The category of the boxes is ignored.

    Candidates are visited from highest to lowest score. A candidate is kept unless its iou with an already kept box
    is larger than `iou_threshold`. Candidates with equal scores are visited in the order of `indices`.

    Based on <https://github.com/tensorflow/tensorflow/blob/master/tensorflow/core/kernels/non_max_suppression_op.cc>

    Example:
        ```python
        predictions = [
            NMSPrediction(0, 0.9, Rect(0, 0, 10, 10)),
            NMSPrediction(0, 0.8, Rect(1, 1, 10, 10)),
            NMSPrediction(0, 0.5, Rect(50, 50, 10, 10)),
        ]
        nms(predictions, iou_threshold=0.5, max_selected=10)  # [0, 2]
        ```

    Args:
        predictions: A sequence of `NMSPrediction`
        iou_threshold: Boxes with a larger iou than this will be suppressed
        max_selected: Maximum number of boxes to select
        indices: Candidates to consider. All predictions if `None`.

    Returns:
        The indices of the selected predictions in the order they have been selected, i.e. highest score first.
    """
    candidates = _sort_by_score(predictions, range(len(predictions)) if indices is None else indices)
    if not candidates or max_selected <= 0:
        return []

    boxes = rects_to_np_array([predictions[idx].rect for idx in candidates])
    selected: list[int] = []
    selected_pos: list[int] = []

    for pos, idx in enumerate(candidates):
        if len(selected) >= max_selected:
            break
        if selected_pos:
            ious = np_iou(boxes[pos : pos + 1], boxes[selected_pos])
            if np.any(ious > iou_threshold):
                continue
        selected.append(idx)
        selected_pos.append(pos)

    return selected


def multi_class_nms(
    num_classes: int,
    predictions: Sequence[NMSPrediction],
    score_threshold: float,
    iou_threshold: float,
    max_per_class: int,
    max_total: int,
) -> list[int]:
    """
    Multi-class version of `nms`. Boxes only suppress boxes of their own class.

    Predictions with `score <= score_threshold` are dropped. The remaining ones are grouped by `class_index` and `nms`
    runs independently for every class with `max_per_class` as limit. If more than `max_total` boxes survive, the ones
    with the highest scores are kept.

    Args:
        num_classes: Number of classes. Class indices must lie in `[0, num_classes)`.
        predictions: A sequence of `NMSPrediction`
        score_threshold: Only boxes with a larger score are considered
        iou_threshold: Boxes of the same class with a larger iou than this will be suppressed
        max_per_class: Maximum number of boxes to select per class
        max_total: Maximum number of boxes to select in total

    Returns:
        The indices of the selected predictions, grouped by class in ascending class order. If the result has been
        truncated to `max_total` it is ordered by descending score instead.

    Raises:
        ValueError: If a class index is outside of `[0, num_classes)`.
    """
    buckets: list[list[int]] = [[] for _ in range(num_classes)]
    for idx, prediction in enumerate(predictions):
        if prediction.score <= score_threshold:
            continue
        if not 0 <= prediction.class_index < num_classes:
            raise ValueError(
                f"Prediction {idx} has class_index {prediction.class_index}, expected a value in [0, {num_classes})"
            )
        buckets[prediction.class_index].append(idx)

    selected: list[int] = []
    for bucket in buckets:
        selected.extend(nms(predictions, iou_threshold, max_per_class, indices=bucket))

    if len(selected) > max_total:
        selected = _sort_by_score(predictions, selected)[: max(max_total, 0)]
    return selected
