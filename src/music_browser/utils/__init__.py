"""
Cross-cutting utilities for Music Browser.

Contains:
- selection: cyclic cursor arithmetic shared by the explorer and playlist
"""
