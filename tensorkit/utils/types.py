# -*- coding: utf-8 -*-
# File: types.py

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
Typing sheet for the whole package
"""

import os
from typing import Sequence, TypeVar, Union

import numpy as np
import numpy.typing as npt
from numpy import float32, float64, int32, uint8
from typing_extensions import TypeAlias

# Flat element storage of a strided view
Storage = Union[npt.NDArray[float32], npt.NDArray[float64], npt.NDArray[int32]]
# A single element read from a view
Element = Union[int, float, np.number]
# Bytes handed over to an image consumer
PixelValues = npt.NDArray[uint8]
# Arrays of boxes in xyxy format
BoxArray = npt.NDArray[float64]

Shape: TypeAlias = tuple[int, ...]
Strides: TypeAlias = tuple[int, ...]
ShapeLike = Sequence[int]

BoxCoordinate = Union[int, float]

# Typing for curry decorator
DP = TypeVar("DP")
S = TypeVar("S")
T = TypeVar("T")

PathLikeOrStr: TypeAlias = Union[str, os.PathLike]

PackageAvailable: TypeAlias = bool
ErrorMsg: TypeAlias = str
Requirement = tuple[str, PackageAvailable, ErrorMsg]
