from timehelper.errors import InvalidArgument
from timehelper.util import DAY, HOUR, MINUTE, SECOND

# Largest unit first
_UNITS = (
    (DAY, "天"),
    (HOUR, "小时"),
    (MINUTE, "分"),
    (SECOND, "秒"),
)


def translate_secs(seconds: int) -> str:
    """
    Render a duration as days, hours, minutes and seconds.

    Units with a zero count are left out, so ``60`` gives ``"1分"`` and
    ``0`` gives an empty string.

    Args:
        seconds: Non-negative duration in seconds

    Raises:
        TypeError: If seconds is not an int
        InvalidArgument: If seconds is negative

    Example:
        >>> translate_secs(90061)
        '1天1小时1分1秒'
    """
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise TypeError(
            f"seconds must be int, got {type(seconds).__name__!r}: {seconds!r}"
        )
    if seconds < 0:
        raise InvalidArgument(f"seconds must be non-negative, got {seconds}")

    output = ""
    for unit, label in _UNITS:
        if seconds >= unit:
            output += f"{seconds // unit}{label}"
        seconds %= unit
    return output
