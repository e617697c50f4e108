"""
Renders byte counts and elapsed time for the join summary.
"""

_SIZE_UNITS = ("KB", "MB", "GB")


def format_size(num_bytes: int) -> str:
    """'512 B' below a kilobyte, otherwise one decimal in the largest fitting unit."""
    if num_bytes < 1024:
        return f"{max(num_bytes, 0)} B"
    value = float(num_bytes)
    for unit in _SIZE_UNITS:
        value /= 1024
        if value < 1024 or unit == _SIZE_UNITS[-1]:
            break
    return f"{value:.1f} {unit}"


def format_duration(seconds: float) -> str:
    """
    Short runs keep a decimal ('0.8s'); longer ones use padded fields
    ('3m 05s', '1h 02m').
    """
    if seconds < 60:
        return f"{max(seconds, 0.0):.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs:02d}s"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes:02d}m"
