class InvalidArgument(ValueError):
    """Raised for malformed time-of-day strings, out-of-range hours and
    negative durations or offsets."""
