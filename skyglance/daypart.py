# ABOUTME: Classifies a local ISO timestamp into sunrise, day, sunset, or night.
# ABOUTME: Unparseable timestamps fall back to night so a theme can always be chosen.

import logging

from skyglance.models import TimeOfDay

logger = logging.getLogger(__name__)


def classify(local_time: str) -> TimeOfDay:
    """Bucket the hour of a "YYYY-MM-DDTHH:MM" timestamp.

    05-07 sunrise, 08-17 day, 18-19 sunset, anything else night. The hour is read
    from characters 11-12; unless they are exactly two digits the result is night.
    """
    hour_text = local_time[11:13]
    if not (len(hour_text) == 2 and hour_text.isascii() and hour_text.isdigit()):
        logger.debug("Cannot read hour from %r, using night", local_time)
        return TimeOfDay.NIGHT
    hour = int(hour_text)

    if 5 <= hour <= 7:
        return TimeOfDay.SUNRISE
    if 8 <= hour <= 17:
        return TimeOfDay.DAY
    if 18 <= hour <= 19:
        return TimeOfDay.SUNSET
    return TimeOfDay.NIGHT
