"""
Shared constants, colors, helpers and logging
"""
