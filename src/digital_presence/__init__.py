"""
Digital Presence - wizard progress and governance rule engine.

Pure functions that turn a business profile snapshot into dashboard view
models, plus lookups over the static governance catalog.
"""

__version__ = "1.0.0"
