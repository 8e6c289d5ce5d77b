"""
Maze generation and grid model
"""
