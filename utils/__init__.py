"""
utils package
-------------

Contains utility modules used throughout the booking scheduler.

Includes helpers for configuration constants, local-day arithmetic, category keys, reservation loading, validation and logging.
"""
