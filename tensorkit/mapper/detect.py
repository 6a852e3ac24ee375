# -*- coding: utf-8 -*-
# File: detect.py

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
Mapping functions for filtering the detections of one image
"""
from __future__ import annotations

from typing import Optional, Sequence

from ..utils.logger import LoggingRecord, logger
from .maputils import curry
from .nms import NMSPrediction, multi_class_nms, nms

__all__ = ["filter_predictions"]


@curry
def filter_predictions(
    dp: Sequence[NMSPrediction],
    score_threshold: float,
    iou_threshold: float,
    max_total: int,
    multi_class: bool = False,
    num_classes: Optional[int] = None,
    max_per_class: Optional[int] = None,
) -> list[NMSPrediction]:
    """
    Drops predictions with a score not larger than `score_threshold` and passes the remaining ones through NMS.

    Example:
        ```python
        mapper = filter_predictions(score_threshold=0.1, iou_threshold=0.5, max_total=6)
        survivors = mapper(predictions)
        ```

    Args:
        dp: Predictions of one image
        score_threshold: Only predictions with a larger score are kept
        iou_threshold: NMS threshold
        max_total: Maximum number of predictions to return
        multi_class: If `True`, boxes only suppress boxes of the same class (see `multi_class_nms`). Otherwise, the
                     class is ignored.
        num_classes: Required if `multi_class=True`
        max_per_class: Maximum number of predictions per class. Defaults to `max_total`. Only used if
                       `multi_class=True`.

    Returns:
        The surviving predictions in the order they have been selected
    """
    if multi_class:
        assert num_classes is not None, "num_classes must be set when multi_class=True"
        selected = multi_class_nms(
            num_classes,
            dp,
            score_threshold,
            iou_threshold,
            max_total if max_per_class is None else max_per_class,
            max_total,
        )
    else:
        candidates = [idx for idx, prediction in enumerate(dp) if prediction.score > score_threshold]
        selected = nms(dp, iou_threshold, max_total, indices=candidates)

    logger.debug(
        LoggingRecord(
            f"NMS kept {len(selected)} of {len(dp)} predictions",
            {"num_predictions": len(dp), "num_selected": len(selected), "multi_class": multi_class},
        )
    )
    return [dp[idx] for idx in selected]
