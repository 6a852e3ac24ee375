# -*- coding: utf-8 -*-
# File: conftest.py

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
Module for globally accessible fixtures
"""

from typing import List

import numpy as np
from pytest import Config, fixture

from tensorkit.datapoint import Rect, StridedArrayView
from tensorkit.mapper import NMSPrediction


def pytest_configure(config: Config) -> None:
    """
    Register custom markers
    """
    config.addinivalue_line("markers", "basic: tests that only require the base installation")


@fixture(name="sequence_view")
def fixture_sequence_view() -> StridedArrayView:
    """
    View of shape [3, 4, 2] filled row-major with 0, 1, ..., 23 (float32)
    """
    return StridedArrayView.wrap(np.arange(24, dtype=np.float32), [3, 4, 2])


@fixture(name="predictions")
def fixture_predictions() -> List[NMSPrediction]:
    """
    Three predictions of one class. The second one overlaps the first one heavily, the third one is far away.
    """
    return [
        NMSPrediction(0, 0.9, Rect(0, 0, 10, 10)),
        NMSPrediction(0, 0.8, Rect(1, 1, 10, 10)),
        NMSPrediction(0, 0.5, Rect(50, 50, 10, 10)),
    ]


@fixture(name="cluster_predictions")
def fixture_cluster_predictions() -> List[NMSPrediction]:
    """
    Two classes, each with a cluster of overlapping boxes plus one isolated box
    """
    return [
        NMSPrediction(0, 0.95, Rect(10, 10, 40, 40)),
        NMSPrediction(0, 0.90, Rect(12, 12, 40, 40)),
        NMSPrediction(0, 0.40, Rect(14, 10, 38, 42)),
        NMSPrediction(0, 0.60, Rect(200, 200, 20, 20)),
        NMSPrediction(1, 0.85, Rect(10, 10, 40, 40)),
        NMSPrediction(1, 0.70, Rect(11, 11, 39, 39)),
        NMSPrediction(1, 0.05, Rect(300, 10, 20, 20)),
        NMSPrediction(1, 0.55, Rect(120, 120, 30, 30)),
    ]
