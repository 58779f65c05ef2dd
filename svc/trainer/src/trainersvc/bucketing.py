from datetime import datetime

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def time_of_day(hour: int) -> str:
    if hour < 4:
        return "night"
    if hour < 12:
        return "morning"
    if hour < 18:
        return "afternoon"
    if hour < 22:
        return "evening"
    return "night"


def bucket_timestamp(ts: datetime | None) -> tuple[str, str]:
    """map an impression time to (time of day, weekday) labels.

    the timestamp is read as wall-clock time, no timezone conversion.
    a missing timestamp lands in the unknown bucket ("", "").
    """
    if ts is None:
        return "", ""
    return time_of_day(ts.hour), WEEKDAYS[ts.weekday()]
