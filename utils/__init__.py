# -*- coding: utf-8 -*-
"""
MTCIT Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import parse_form_date, parse_json_list, is_truthy

__all__ = [
    "get_logger",
    "setup_logger",
    "parse_form_date",
    "parse_json_list",
    "is_truthy",
]
