"""
Command-line tools for Mobile Storage.
"""
