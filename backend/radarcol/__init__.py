"""RadarCol: contract list pipeline and dashboard API for procurement risk data."""

__version__ = "1.0.0"
