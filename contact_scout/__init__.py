# contact_scout/__init__.py
"""
ContactScout package initializer.
Defines package version.
"""
__version__ = "0.1.0"
