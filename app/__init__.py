# -*- coding: utf-8 -*-
"""
CRM Forms Application Core Module
"""

from .config import Config

__all__ = ["Config"]
