"""
                Restaurant Management API

Async backend for menu categories, menu items and user accounts, plus the
public menu customers see.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
