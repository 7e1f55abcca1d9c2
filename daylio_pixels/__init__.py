"""
Daylio <-> Year in Pixels backup converter.
"""
__version__ = "1.0.0"
