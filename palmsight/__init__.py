"""PalmSight — palm keypoint interpretation engine."""

__version__ = "1.0.0"
