"""
Utilities Package

This package contains helper functions used across the application.

- routing.py: the publication date path convertor and its parser
"""
