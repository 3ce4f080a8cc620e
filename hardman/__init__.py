"""Hardman - fitness coaching state and progression engine"""

__version__ = "0.1.0"
