"""
Backup format readers, writers and mappers.
"""
