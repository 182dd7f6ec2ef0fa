"""
show - a small command line tool for everyday system and network lookups.
"""

__version__ = "0.1.0"
