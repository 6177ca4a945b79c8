"""Event processing helpers.

Every player event, whatever its source, passes through the same validator
pipeline before it may change a room state.
"""
