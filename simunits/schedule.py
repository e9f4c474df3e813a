"""
Time-of-day comparison for timetable logic.

Times are integer seconds since local midnight. A working day is taken to
run from the afternoon through the night into the next morning, so a time
in the small hours is "later" than a time in the evening even though its
number is smaller: morning comes after night, which comes after evening,
but morning is before afternoon, which is before evening.
"""

MORNING_BOUNDARY = 8 * 3600
EVENING_BOUNDARY = 16 * 3600
SECONDS_PER_DAY = 24 * 3600


def latest_of(time1: int, time2: int) -> int:
    """
    Return the later of two times, treating early morning as after evening.

    Equal times (and any pair the night rule does not cover) fall back to
    numeric order; ties return ``time2``.
    """
    if time1 > EVENING_BOUNDARY and time2 < MORNING_BOUNDARY:
        return time2
    if time1 < MORNING_BOUNDARY and time2 > EVENING_BOUNDARY:
        return time1
    if time1 > time2:
        return time1
    return time2


def earliest_of(time1: int, time2: int) -> int:
    """
    Return the earlier of two times, treating evening as before early morning.

    Ties return ``time1``.
    """
    if time1 > EVENING_BOUNDARY and time2 < MORNING_BOUNDARY:
        return time1
    if time1 < MORNING_BOUNDARY and time2 > EVENING_BOUNDARY:
        return time2
    if time1 > time2:
        return time2
    return time1


def parse_clock(text: str) -> int:
    """
    Parse ``HH:MM`` or ``HH:MM:SS`` into seconds since midnight.

    A bare integer is taken as seconds already.

    Raises:
        ValueError: If the text is not a valid clock time
    """
    text = text.strip()
    if text.lstrip("-").isdigit():
        return int(text)

    parts = text.split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid clock time {text!r}, expected HH:MM or HH:MM:SS")

    hours, minutes = int(parts[0]), int(parts[1])
    seconds = int(parts[2]) if len(parts) == 3 else 0
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValueError(f"Invalid clock time {text!r}: field out of range")
    return hours * 3600 + minutes * 60 + seconds


def format_clock(seconds: int) -> str:
    """Format seconds since midnight as ``HH:MM:SS``, wrapping at 24 hours."""
    seconds %= SECONDS_PER_DAY
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
