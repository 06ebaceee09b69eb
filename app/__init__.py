# -*- coding: utf-8 -*-
"""
MTCIT Application Core Module
"""

from .config import Config, PersonTypes

__all__ = ["Config", "PersonTypes"]
