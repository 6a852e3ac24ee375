# -*- coding: utf-8 -*-
# File: __init__.py

"""
# Configuration and factory

`get_nms_mapper` builds a detection filter from the defaults in `analyzer.config`, an optional `.yaml` file and
`key=value` overwrites.
"""

from .config import cfg
from .factory import *
