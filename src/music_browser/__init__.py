"""
Music Browser - terminal file browser and music player.
"""

__version__ = "1.0.0"
