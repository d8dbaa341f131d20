"""
Mobile Storage - local mobile-device inventory

Keeps a list of inventoried mobile devices (IMEI + model name) in an
embedded SQLite database and supports add, search by IMEI and delete.

Main modules:
- inventory: device records, persistent store and inventory service
- core: configuration
- cli: mobilectl operational CLI
"""

__version__ = "0.1.0"
__author__ = "Mobile Storage Team"

__all__ = ["__version__", "__author__"]
