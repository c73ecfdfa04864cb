"""
Instant Siege Reload - configurable reload times for catapults and ballistas
"""

__version__ = "1.0.1"
