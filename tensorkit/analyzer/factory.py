# -*- coding: utf-8 -*-
# File: factory.py

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
Factory for building a configured detection filter
"""
from __future__ import annotations

from typing import Optional

from ..mapper.detect import filter_predictions
from ..mapper.maputils import DefaultMapper
from ..utils.logger import LoggingRecord, logger
from ..utils.metacfg import AttrDict, set_config_by_yaml
from ..utils.types import PathLikeOrStr
from .config import cfg

__all__ = ["get_nms_config", "get_nms_mapper"]


def _config_sanity_checks(config: AttrDict) -> None:
    if config.NMS.MULTI_CLASS and config.NMS.NUM_CLASSES < 1:
        raise ValueError("NMS.NUM_CLASSES must be a positive number when NMS.MULTI_CLASS=True")
    if not 0.0 <= config.NMS.IOU_THRESHOLD <= 1.0:
        raise ValueError(f"NMS.IOU_THRESHOLD must lie in [0, 1], got {config.NMS.IOU_THRESHOLD}")
    if config.NMS.MAX_TOTAL < 0 or config.NMS.MAX_PER_CLASS < 0:
        raise ValueError("NMS.MAX_TOTAL and NMS.MAX_PER_CLASS must not be negative")


def get_nms_config(
    path_config_file: Optional[PathLikeOrStr] = None, config_overwrite: Optional[list[str]] = None
) -> AttrDict:
    """
    Builds a frozen config from the defaults in `analyzer.config`.

    Args:
        path_config_file: Optional `.yaml` file. Its values overwrite the defaults.
        config_overwrite: A list of `key=value` strings with highest priority, e.g.
            `["NMS.MULTI_CLASS=True", "NMS.MAX_TOTAL=10"]`.

    Returns:
        A frozen `AttrDict`

    Raises:
        ValueError: If thresholds or limits are out of range.
    """
    config = AttrDict()
    config.from_dict(cfg.to_dict())
    if path_config_file:
        config.overwrite_config(set_config_by_yaml(path_config_file))
    if config_overwrite:
        config.update_args(config_overwrite)
    config.freeze()

    _config_sanity_checks(config)
    return config


def get_nms_mapper(
    path_config_file: Optional[PathLikeOrStr] = None, config_overwrite: Optional[list[str]] = None
) -> DefaultMapper:
    """
    Factory function for a `filter_predictions` mapper configured by `get_nms_config`.

    Example:
        ```python
        mapper = get_nms_mapper(config_overwrite=["NMS.MULTI_CLASS=True", "NMS.NUM_CLASSES=80"])
        survivors = mapper(predictions)
        ```

    Returns:
        A callable that takes a sequence of `NMSPrediction` and returns the surviving ones
    """
    config = get_nms_config(path_config_file, config_overwrite)
    logger.info(LoggingRecord(f"Config: \n {str(config)}", config.to_dict()))  # type: ignore

    return filter_predictions(  # type: ignore
        score_threshold=config.NMS.SCORE_THRESHOLD,
        iou_threshold=config.NMS.IOU_THRESHOLD,
        max_total=config.NMS.MAX_TOTAL,
        multi_class=config.NMS.MULTI_CLASS,
        num_classes=config.NMS.NUM_CLASSES,
        max_per_class=config.NMS.MAX_PER_CLASS,
    )
