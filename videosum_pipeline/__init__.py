"""
YouTube channel runtime sum
"""

__version__ = "0.1.0"
