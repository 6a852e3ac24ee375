# -*- coding: utf-8 -*-
# File: maputils.py

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
Utility functions related to mapping tasks
"""
from __future__ import annotations

import functools
from typing import Any, Callable

from ..utils.types import DP, S, T

__all__ = ["DefaultMapper", "curry"]


class DefaultMapper:
    """
    A class that wraps a function and places some pre-defined values starting from the second argument once the
    function is invoked.

    <https://stackoverflow.com/questions/36314/what-is-currying>
    """

    def __init__(self, func: Callable[[DP, S], T], *args: Any, **kwargs: Any) -> None:
        """
        Args:
            func: A mapping function
            args: Default `args` to pass to the function
            kwargs: Default `kwargs` to pass to the function
        """
        self.func = func
        self.argument_args = args
        self.argument_kwargs = kwargs

    def __call__(self, dp: Any) -> Any:
        """
        Call the wrapped function with the given datapoint and default arguments.

        Args:
            dp: A datapoint, e.g. the list of predictions of one image.

        Returns:
            The return value of the invoked function with default arguments.
        """
        return self.func(dp, *self.argument_args, **self.argument_kwargs)


def curry(func: Callable[..., T]) -> Callable[..., Callable[[DP], T]]:
    """
    Decorator for converting functions that map a datapoint to `DefaultMapper`s. They will be initialized with all
    arguments except `dp` and can be called later with only the datapoint as argument.

    Example:
        ```python
        @curry
        def filter_predictions(dp, score_threshold, iou_threshold, ...) -> list[NMSPrediction]:
            ...

        mapper = filter_predictions(score_threshold=0.1, iou_threshold=0.5, max_total=6)
        survivors = [mapper(predictions) for predictions in batch]
        ```

    Args:
        func: A callable whose first argument is the datapoint

    Returns:
        A `DefaultMapper`.
    """

    @functools.wraps(func)
    def wrap(*args: Any, **kwargs: Any) -> DefaultMapper:
        return DefaultMapper(func, *args, **kwargs)

    return wrap
