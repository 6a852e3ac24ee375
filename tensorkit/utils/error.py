# -*- coding: utf-8 -*-
# File: error.py

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
Custom exceptions
"""

__all__ = [
    "ArrayViewError",
    "ShapeMismatchError",
    "RankMismatchError",
    "InvalidChannelError",
    "DataTypeError",
    "DependencyError",
]


class ArrayViewError(BaseException):
    """Base exception for `datapoint.multiarray.StridedArrayView`"""


class ShapeMismatchError(ArrayViewError):
    """
    Raised when a view is reshaped to a shape with a different number of elements.

    Example:
        ```python
        view = StridedArrayView.zeros([3, 4, 2])
        view.reshaped([5, 5])  # raises ShapeMismatchError
        ```
    """

    def __init__(self, shape: tuple[int, ...], new_shape: tuple[int, ...]) -> None:
        super().__init__(f"Cannot reshape {list(shape)} to {list(new_shape)}")
        self.shape = shape
        self.new_shape = new_shape


class RankMismatchError(ArrayViewError):
    """Raised when an operation requires a view of a different rank"""

    def __init__(self, shape: tuple[int, ...], *expected: int) -> None:
        ranks = " or ".join(str(rank) for rank in expected)
        super().__init__(f"Expected a multi-array with {ranks} dimensions, got {list(shape)}")
        self.expected = expected
        self.shape = shape


class InvalidChannelError(ArrayViewError):
    """Raised when the channel dimension or a channel index does not fit the view"""


class DataTypeError(ArrayViewError):
    """Raised when a buffer has an element type that is not supported"""


class DependencyError(BaseException):
    """Special exception only for missing dependencies. We do not use the internals `ImportError` or
    `ModuleNotFoundError`."""
