# -*- coding: utf-8 -*-
# File: test_metacfg.py

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
Testing the module utils.metacfg
"""

from pathlib import Path

from pytest import mark, raises

from tensorkit.utils.metacfg import AttrDict, save_config_to_yaml, set_config_by_yaml


class TestAttrDict:
    """
    Test AttrDict
    """

    @staticmethod
    @mark.basic
    def test_nested_attributes_and_to_dict() -> None:
        """
        Missing attributes create nested AttrDicts
        """

        # Arrange
        config = AttrDict()

        # Act
        config.NMS.IOU_THRESHOLD = 0.5
        config.NAME = "nms"

        # Assert
        assert isinstance(config.NMS, AttrDict)
        assert config.to_dict() == {"NMS": {"IOU_THRESHOLD": 0.5}, "NAME": "nms"}

    @staticmethod
    @mark.basic
    def test_freeze() -> None:
        """
        Frozen configs reject new and changed values, including nested ones
        """

        # Arrange
        config = AttrDict()
        config.NMS.MAX_TOTAL = 6
        config.freeze()

        # Act and Assert
        with raises(AttributeError):
            config.NMS.MAX_TOTAL = 7
        with raises(AttributeError):
            config.OTHER.VALUE = 1

        # Act
        config.freeze(False)
        config.NMS.MAX_TOTAL = 7

        # Assert
        assert config.NMS.MAX_TOTAL == 7

    @staticmethod
    @mark.basic
    def test_update_args_parses_values() -> None:
        """
        Non-string values are parsed, string values are kept as they are
        """

        # Arrange
        config = AttrDict()
        config.NMS.MULTI_CLASS = False
        config.NMS.MAX_TOTAL = 6
        config.NAME = "default"

        # Act
        config.update_args(["NMS.MULTI_CLASS=true", "NMS.MAX_TOTAL=10", "NAME=10"])

        # Assert
        assert config.NMS.MULTI_CLASS is True
        assert config.NMS.MAX_TOTAL == 10
        assert config.NAME == "10"
        with raises(AssertionError):
            config.update_args(["NMS.MISSING=1"])

    @staticmethod
    @mark.basic
    def test_overwrite_config() -> None:
        """
        Values of another config are merged in
        """

        # Arrange
        config = AttrDict()
        config.NMS.MAX_TOTAL = 6
        config.NMS.MAX_PER_CLASS = 2
        other = AttrDict()
        other.NMS.MAX_TOTAL = 1

        # Act
        config.overwrite_config(other)

        # Assert
        assert config.to_dict() == {"NMS": {"MAX_TOTAL": 1, "MAX_PER_CLASS": 2}}
        config.freeze()
        with raises(AttributeError):
            config.overwrite_config(other)

    @staticmethod
    @mark.basic
    def test_comparison_is_not_supported() -> None:
        """
        Comparing configs raises an error
        """

        # Act and Assert
        with raises(NotImplementedError):
            _ = AttrDict() == AttrDict()


@mark.basic
def test_save_and_load_yaml(tmp_path: Path) -> None:
    """
    A saved config can be loaded again as frozen AttrDict
    """

    # Arrange
    config = AttrDict()
    config.NMS.IOU_THRESHOLD = 0.45
    config.NMS.MULTI_CLASS = True
    path = tmp_path / "config.yaml"

    # Act
    save_config_to_yaml(config, path)
    loaded = set_config_by_yaml(path)

    # Assert
    assert loaded.to_dict() == config.to_dict()
    with raises(AttributeError):
        loaded.NMS.IOU_THRESHOLD = 0.5
