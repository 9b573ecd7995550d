"""Centroid update strategies."""

from .mean import MeanUpdater

__all__ = [
    'MeanUpdater'
]
