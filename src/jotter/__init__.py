"""
Jotter: personal notes from the terminal.

A small note keeper that provides:
- Tagged capture from the command line
- Content and #tag search
- A single-page web view of everything captured
"""

__version__ = "0.1.0"
