"""
Translation utilities for constraint rewriting.

This module builds the range -> replacement table for a constraint
and applies it without rescanning replaced text.
"""

from lightning_dev.transforms.rewrite import rewrite_ranges
from lightning_dev.transforms.translate import translate
from lightning_dev.transforms.types import RangeCallback, RangeRewrite

__all__ = ["RangeCallback", "RangeRewrite", "rewrite_ranges", "translate"]
