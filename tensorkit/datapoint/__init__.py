# -*- coding: utf-8 -*-
# File: __init__.py

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
# Core data model

- `StridedArrayView` reinterprets flat model output with an explicit shape and strides and converts it into pixel
  bytes.
- `Rect` and `iou` describe detection boxes and their overlap.
"""

from .box import *
from .convert import *
from .multiarray import *
