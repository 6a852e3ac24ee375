# -*- coding: utf-8 -*-
# File: settings.py

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
Module for enums and constants that maintain general settings
"""
from __future__ import annotations

from enum import Enum
from typing import Union

import catalogue  # type: ignore
import numpy as np
import numpy.typing as npt

from .error import DataTypeError

__all__ = ["ObjectTypes", "TypeOrStr", "object_types_registry", "DataType", "PixelMode", "get_type", "get_data_type"]


class ObjectTypes(str, Enum):
    """Base Class for describing objects as attributes of Enums"""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}.{self.name}>"

    @classmethod
    def from_value(cls, value: str) -> ObjectTypes:
        """Getting the enum member from a given string value

        :param value: string value to get the enum member
        :return: Enum member
        """
        for member in cls.__members__.values():
            if member.value == value:
                return member
        raise ValueError(f"value {value} does not have corresponding member")


TypeOrStr = Union[ObjectTypes, str]  # pylint: disable=C0103

object_types_registry = catalogue.create("tensorkit", "settings", entry_points=True)


# pylint: disable=invalid-name
@object_types_registry.register("DataType")
class DataType(ObjectTypes):
    """Element types a `StridedArrayView` can hold"""

    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT32 = "int32"

    @property
    def np_dtype(self) -> np.dtype:  # type: ignore
        """The corresponding numpy dtype"""
        return np.dtype(self.value)


@object_types_registry.register("PixelMode")
class PixelMode(ObjectTypes):
    """Layouts of byte buffers produced from a view. Values follow the Pillow mode names"""

    RGBA = "RGBA"
    GRAY = "L"


# pylint: enable=invalid-name


def _all_types() -> dict[str, ObjectTypes]:
    return {member.value: member for obj in object_types_registry.get_all().values() for member in obj}


def get_type(obj_type: TypeOrStr) -> ObjectTypes:
    """
    Get an object type property from a given string. Does nothing if an `ObjectTypes` member is passed.

    Args:
        obj_type: String or `ObjectTypes`

    Returns:
        `ObjectTypes` member

    Raises:
        KeyError: If the string does not belong to any registered type.
    """
    if isinstance(obj_type, ObjectTypes):
        return obj_type
    return_value = _all_types().get(obj_type)
    if return_value is None:
        raise KeyError(f"String {obj_type} does not correspond to a registered ObjectType")
    return return_value


def get_data_type(dtype: Union[TypeOrStr, npt.DTypeLike]) -> DataType:
    """
    Resolve a `DataType` from a member, a string like `"float32"` or anything numpy accepts as dtype.

    Args:
        dtype: The element type to resolve.

    Returns:
        `DataType` member

    Raises:
        DataTypeError: If the element type is not one of `float32`, `float64` or `int32`.
    """
    if isinstance(dtype, DataType):
        return dtype
    try:
        name = np.dtype(dtype).name  # type: ignore
    except TypeError as err:
        raise DataTypeError(f"Cannot interpret {dtype!r} as element type") from err
    for member in DataType:
        if member.value == name:
            return member
    raise DataTypeError(f"Element type {name} is not supported. Use one of {[member.value for member in DataType]}")
