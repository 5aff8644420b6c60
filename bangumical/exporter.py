"""Export calendar events to JSON."""

import json
import logging
from pathlib import Path

from .models import CalendarEvent

logger = logging.getLogger(__name__)


def event_to_dict(event: CalendarEvent) -> dict:
    """Shape an event the way calendar writers expect it."""
    return {
        "start": list(event.start.as_tuple()),
        "duration": {"minutes": event.duration_minutes},
        "title": event.title,
        "description": event.description,
        "url": event.url,
    }


class EventExporter:
    """Writes assembled events to an output directory."""

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_events(
        self, events: list[CalendarEvent], filename: str = "events.json"
    ) -> Path:
        """Export events as a JSON list.

        Args:
            events: Events in calendar order
            filename: Output filename

        Returns:
            Path of the written file
        """
        output_path = self.output_dir / filename

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(
                [event_to_dict(e) for e in events], f, indent=2, ensure_ascii=False
            )

        file_size = output_path.stat().st_size / 1024  # KB
        logger.info(
            f"Exported {len(events)} events to {output_path} ({file_size:.1f} KB)"
        )
        return output_path
