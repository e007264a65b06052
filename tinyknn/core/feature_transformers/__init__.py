"""
Feature transformation components for tinyknn.
"""

from .base import FeatureTransformer
from .running_stats import RunningStats
from .standardizer import OnlineStandardizer

__all__ = ['FeatureTransformer', 'RunningStats', 'OnlineStandardizer']
