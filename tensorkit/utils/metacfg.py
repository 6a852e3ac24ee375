# -*- coding: utf-8 -*-
# File: metacfg.py

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
Class `AttrDict` for maintaining configs and functions for loading and saving `AttrDict` instances from and to
`.yaml` files
"""
from __future__ import annotations

import pprint
from typing import Any

import yaml

from .types import PathLikeOrStr

__all__ = ["AttrDict", "set_config_by_yaml", "save_config_to_yaml"]


# Copyright (c) Tensorpack Contributors
# Licensed under the Apache License, Version 2.0 (the "License")
class AttrDict:
    """
    Key-value store with attribute access. Missing attributes create a nested `AttrDict` as long as the instance is
    not frozen.

    Example:
        ```python
        cfg = AttrDict()
        cfg.NMS.IOU_THRESHOLD = 0.5
        cfg.freeze()
        ```
    """

    _freezed = False

    def __getattr__(self, name: str) -> Any:
        if self._freezed:
            raise AttributeError(name)
        if name.startswith("_"):
            # Do not mess with internals. Otherwise, copy/pickle will fail
            raise AttributeError(name)
        ret = AttrDict()
        setattr(self, name, ret)
        return ret

    def __setattr__(self, name: str, value: Any) -> None:
        if self._freezed and name != "_freezed":
            raise AttributeError(f"Config was freezed! Unknown config: {name}")
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return pprint.pformat(self.to_dict(), width=100, compact=True)

    __repr__ = __str__

    def to_dict(self) -> dict[str, Any]:
        """
        Returns:
            A nested dict of all public attributes.
        """
        return {
            k: v.to_dict() if isinstance(v, AttrDict) else v for k, v in self.__dict__.items() if not k.startswith("_")
        }

    def from_dict(self, d: dict[str, Any]) -> None:  # pylint: disable=C0103
        """
        Update the instance from a (nested) dict. Nested dicts update nested `AttrDict`s instead of replacing them.

        Args:
            d: The dictionary to load values from.
        """
        if isinstance(d, dict):
            self.freeze(False)
            for k, v in d.items():  # pylint: disable=C0103
                self_v = getattr(self, k)
                if isinstance(v, dict):
                    self_v.from_dict(v)
                else:
                    setattr(self, k, v)

    def update_args(self, args: list[str]) -> None:
        """
        Update from command line like arguments in the form `key1.key2=val`. Values of non-string entries are parsed
        as YAML scalars, e.g. `NMS.MAX_TOTAL=10` or `NMS.MULTI_CLASS=true`.

        Args:
            args: A list of `key=value` strings.
        """
        for cfg in args:
            keys, v = cfg.split("=", maxsplit=1)  # pylint: disable=C0103
            key_list = keys.split(".")

            dic = self
            for k in key_list[:-1]:
                assert k in dir(dic), f"Unknown config key: {keys}"
                dic = getattr(dic, k)
            key = key_list[-1]
            assert key in dir(dic), f"Unknown config key: {keys}"

            old_v = getattr(dic, key)
            if not isinstance(old_v, str):
                v = yaml.safe_load(v)  # pylint: disable=C0103
            setattr(dic, key, v)

    def overwrite_config(self, other_config: AttrDict) -> None:
        """
        Overwrite the current config with values from another config.

        Raises:
            AttributeError: If the config is frozen.
        """
        if self._freezed:
            raise AttributeError("Config was freezed! Cannot overwrite config.")
        self.from_dict(other_config.to_dict())

    def freeze(self, freezed: bool = True) -> None:
        """
        Freeze or unfreeze the instance and all nested instances.
        """
        self._freezed = freezed
        for v in self.__dict__.values():  # pylint: disable=C0103
            if isinstance(v, AttrDict):
                v.freeze(freezed)

    # avoid silent bugs
    def __eq__(self, _: Any) -> bool:
        raise NotImplementedError()

    def __ne__(self, _: Any) -> bool:
        raise NotImplementedError()


def set_config_by_yaml(path_yaml: PathLikeOrStr) -> AttrDict:
    """
    Initialize a frozen config from a YAML file.

    Args:
        path_yaml: The path to the YAML file.

    Returns:
        An `AttrDict` instance.
    """
    config = AttrDict()
    with open(path_yaml, "r", encoding="utf-8") as file:
        config.from_dict(yaml.safe_load(file))
    config.freeze()
    return config


def save_config_to_yaml(config: AttrDict, path_yaml: PathLikeOrStr) -> None:
    """
    Save the configuration instance as a YAML file.
    """
    with open(path_yaml, "w", encoding="utf-8") as file:
        yaml.dump(config.to_dict(), file)
