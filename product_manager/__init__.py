"""
==============================================================================
Product Manager
==============================================================================

Product catalog persisted to a JSON file, with a small REST API on top.

==============================================================================
"""

__version__ = "1.0.0"
