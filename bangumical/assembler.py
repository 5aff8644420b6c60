import logging

from whenever import ZonedDateTime

from .config import Settings
from .models import AnimeRecord, CalendarEvent, SiteMeta
from .prompt import EpisodeCountPrompt
from .schedule import ScheduleGenerator
from .sites import describe_sites, resolve_sites, select_url

logger = logging.getLogger(__name__)


class EventAssembler:
    """Turns catalog entries into calendar events."""

    def __init__(self, config: Settings, prompt: EpisodeCountPrompt | None = None):
        self.config = config
        self.generator = ScheduleGenerator(config)
        self.prompt = prompt or EpisodeCountPrompt(
            max_failures=config.prompt_max_failures
        )

    def run(
        self,
        anime_list: list[AnimeRecord],
        site_table: dict[str, SiteMeta],
        now: ZonedDateTime,
        manual_mode: bool | None = None,
    ) -> list[CalendarEvent]:
        """Assemble events, asking once for the batch whether to enter counts."""
        if manual_mode is None:
            manual_mode = self.prompt.confirm_manual_mode()
        return self.assemble(anime_list, site_table, now, manual_mode)

    def assemble(
        self,
        anime_list: list[AnimeRecord],
        site_table: dict[str, SiteMeta],
        now: ZonedDateTime,
        manual_mode: bool,
    ) -> list[CalendarEvent]:
        """Build one event per future broadcast of every anime.

        Args:
            anime_list: Catalog entries, in output order
            site_table: Site metadata keyed by site id
            now: Reference time
            manual_mode: Ask for each anime's remaining episode count

        Returns:
            Events grouped by anime, chronological within an anime
        """
        events = []
        for anime in anime_list:
            sites = resolve_sites(anime, site_table)
            episode_count = self.prompt.ask(anime) if manual_mode else None
            broadcast_times = self.generator.generate(anime, now, episode_count)

            title = anime.display_title(self.config.title_locale)
            description = describe_sites(sites)
            url = select_url(
                sites, self.config.preferred_site_order, self.config.fallback_url
            )
            for start in broadcast_times:
                events.append(
                    CalendarEvent(
                        start=start,
                        duration_minutes=self.config.episode_duration_minutes,
                        title=title,
                        description=description,
                        url=url,
                    )
                )

        logger.info(f"Assembled {len(events)} events for {len(anime_list)} anime")
        return events
