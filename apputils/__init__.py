"""App Utilities - deterministic randomness for UI code.

This package provides a seeded ARC4 stream generator and the helpers built on it:
weighted sampling, running-mean statistics and procedural colors, points and strings.
"""

__version__ = "1.0.0"
__author__ = "App Utilities"
