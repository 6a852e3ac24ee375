# -*- coding: utf-8 -*-
# File: file_utils.py
# Copyright (c)  The HuggingFace Team, the AllenNLP library authors.
# Licensed under the Apache License, Version 2.0 (the "License")


"""
Utilities for dealing with optional external packages. Parts of this file are adapted from
<https://github.com/huggingface/transformers/blob/master/src/transformers/file_utils.py>
"""
import importlib.util

from .types import Requirement

__all__ = ["pillow_available", "get_pillow_requirement"]

_GENERIC_ERR_MSG = "Please check the required version either in the docs or in the setup file"

# Pillow
_PILLOW_AVAILABLE = importlib.util.find_spec("PIL") is not None
_PILLOW_ERR_MSG = f"pillow must be installed. {_GENERIC_ERR_MSG}"


def pillow_available() -> bool:
    """
    Returns whether Pillow is installed.

    Returns:
        bool: `True` if Pillow is installed, False otherwise.
    """
    return bool(_PILLOW_AVAILABLE)


def get_pillow_requirement() -> Requirement:
    """
    Returns the Pillow requirement.

    Returns:
        tuple: A tuple containing the package name, whether the requirement is satisfied, and an error message.
    """
    return "pillow", pillow_available(), _PILLOW_ERR_MSG
