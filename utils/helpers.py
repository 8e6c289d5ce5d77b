"""
Helper utility functions for Maze Dash
"""


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def format_time(seconds):
    """Format seconds to MM:SS string (negative shows as 00:00)"""
    seconds = max(0, int(seconds))
    minutes = seconds // 60
    secs = seconds % 60
    return f"{minutes:02d}:{secs:02d}"


def format_score(score):
    """Format score with thousands separator"""
    return f"{score:,}"
