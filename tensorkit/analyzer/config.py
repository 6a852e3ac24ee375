# -*- coding: utf-8 -*-
# File: config.py

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
Default configuration for filtering detections with non-maximum suppression.

    NMS.MULTI_CLASS:
        If `True`, boxes only suppress boxes of the same class and `multi_class_nms` is used. Otherwise, the class is
        ignored.

    NMS.NUM_CLASSES:
        Number of classes the detector predicts. Only used if `NMS.MULTI_CLASS=True`.

    NMS.SCORE_THRESHOLD:
        Predictions with a score not larger than this value are dropped before NMS.

    NMS.IOU_THRESHOLD:
        Boxes with a larger iou than this value with a box of higher score are suppressed.

    NMS.MAX_PER_CLASS:
        Maximum number of boxes per class. Only used if `NMS.MULTI_CLASS=True`.

    NMS.MAX_TOTAL:
        Maximum number of boxes in total.
"""

from ..utils.metacfg import AttrDict

cfg = AttrDict()

cfg.NMS.MULTI_CLASS = False
cfg.NMS.NUM_CLASSES = 4
cfg.NMS.SCORE_THRESHOLD = 0.1
cfg.NMS.IOU_THRESHOLD = 0.5
cfg.NMS.MAX_PER_CLASS = 2
cfg.NMS.MAX_TOTAL = 6

cfg.freeze()
