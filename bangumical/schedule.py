import logging

from whenever import ZonedDateTime

from .config import Settings
from .models import AnimeRecord, BroadcastTime

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def to_broadcast_time(moment: ZonedDateTime) -> BroadcastTime:
    """Decompose a zoned time into its wall-clock fields."""
    return BroadcastTime(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        hour=moment.hour,
        minute=moment.minute,
    )


def _weekday_from_sunday(moment: ZonedDateTime) -> int:
    """Day of week counted from Sunday=0 to Saturday=6."""
    return moment.date().day_of_week().value % DAYS_PER_WEEK


def continuing_anchor(begin: ZonedDateTime, now: ZonedDateTime) -> ZonedDateTime:
    """Find the first slot of a continuing anime relative to now.

    The begin time of day is moved onto now's date. If begin and now share a
    weekday that is the anchor (even if it is earlier today). Otherwise the
    anchor is begin's weekday in the week after now's Sunday-based week, which
    can skip a nearer occurrence later this week.
    """
    aligned = now.replace(
        hour=begin.hour,
        minute=begin.minute,
        second=begin.second,
        nanosecond=begin.nanosecond,
        disambiguation="compatible",
    )
    begin_weekday = _weekday_from_sunday(begin)
    now_weekday = _weekday_from_sunday(now)
    if begin_weekday == now_weekday:
        return aligned
    return aligned.add(
        days=begin_weekday + DAYS_PER_WEEK - now_weekday, disambiguation="compatible"
    )


class ScheduleGenerator:
    """Computes weekly broadcast times for catalog entries."""

    def __init__(self, config: Settings):
        self.config = config

    def generate(
        self,
        anime: AnimeRecord,
        now: ZonedDateTime,
        episode_count: int | None = None,
    ) -> list[BroadcastTime]:
        """Get the broadcast times of an anime after now.

        Times are expressed in now's timezone.

        Args:
            anime: Catalog entry
            now: Reference time
            episode_count: Remaining episodes entered by the user, if any

        Returns:
            Broadcast times in chronological order, one week apart
        """
        begin = anime.begin.to_tz(now.tz_id)

        if episode_count is not None:
            start = begin if anime.is_new else continuing_anchor(begin, now)
            times = self._future_slots(start, now, episode_count)
        elif anime.is_new:
            times = self._future_slots(
                begin, now, self.config.default_season_episode_count
            )
        else:
            # No known end date, extend a fixed number of months past now
            end = now.add(
                months=self.config.old_anime_extension_months,
                disambiguation="compatible",
            )
            times = self._window_slots(continuing_anchor(begin, now), end)

        logger.debug(f"{anime.title}: {len(times)} broadcasts scheduled")
        return times

    def _future_slots(
        self, start: ZonedDateTime, now: ZonedDateTime, count: int
    ) -> list[BroadcastTime]:
        """Walk count weekly slots from start, keeping those after now."""
        times = []
        for week in range(count):
            try:
                slot = self._week_after(start, week)
            except ValueError:
                # Later weeks fall past the last representable date
                logger.warning(
                    f"Stopping at week {week} of {count}: date out of range"
                )
                break
            if slot > now:
                times.append(to_broadcast_time(slot))
        return times

    def _window_slots(
        self, start: ZonedDateTime, end: ZonedDateTime
    ) -> list[BroadcastTime]:
        """Every weekly slot from start up to (not including) end."""
        times = []
        week = 0
        slot = start
        while slot < end:
            times.append(to_broadcast_time(slot))
            week += 1
            slot = self._week_after(start, week)
        return times

    @staticmethod
    def _week_after(start: ZonedDateTime, weeks: int) -> ZonedDateTime:
        # Offset from start each time so a DST gap can't shift later slots
        return start.add(days=weeks * DAYS_PER_WEEK, disambiguation="compatible")
