"""Rolling-average position tracking."""

from positioning.tracker.spherical import spherical_mean
from positioning.tracker.tracker import PositionTracker

__all__ = ["PositionTracker", "spherical_mean"]
