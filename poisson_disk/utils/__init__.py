"""
Shared helpers: default random source and logging setup.
"""
