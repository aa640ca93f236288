"""
Core infrastructure: settings, logging, exceptions and the store.
"""
