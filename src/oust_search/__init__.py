"""
Oust search: alpha-beta game engine for Oust with chained capture turns.
"""

__version__ = "0.1"
