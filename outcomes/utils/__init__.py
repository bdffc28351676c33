"""
Utilities module for the outcomes package.

This package provides configuration, error and logging helpers.
"""
