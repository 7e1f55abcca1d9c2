"""
Core configuration, exceptions, logging and time helpers.
"""
