"""Pydantic models for bangumical data structures."""

from pydantic import BaseModel, ConfigDict, Field
from whenever import Instant


class SiteRef(BaseModel):
    """Reference from an anime to one external site."""

    model_config = ConfigDict(
        extra="ignore", frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    site_id: str = Field(alias="site")
    external_id: str = Field(alias="id")


class AnimeRecord(BaseModel):
    """One catalog entry."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    title: str
    title_translate: dict[str, list[str]] = Field(
        default_factory=dict, alias="titleTranslate"
    )
    begin: Instant
    is_new: bool = Field(default=False, alias="isNew")
    sites: list[SiteRef] = Field(default_factory=list)

    def display_title(self, locale: str = "zh-Hans") -> str:
        """First translated title for the locale, else the raw title."""
        translated = self.title_translate.get(locale)
        if translated:
            return translated[0]
        return self.title


class SiteMeta(BaseModel):
    """Site metadata table entry."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    title: str = ""
    url_template: str = Field(default="", alias="urlTemplate")
    kind: str = Field(default="", alias="type")  # "onair", "info" or "resource"


class ResolvedSite(BaseModel):
    """A site reference joined with its metadata."""

    model_config = ConfigDict(frozen=True)

    site_id: str
    title: str
    url: str


class BroadcastTime(BaseModel):
    """Wall-clock time of one scheduled episode."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int
    hour: int
    minute: int

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute)


class CalendarEvent(BaseModel):
    """Calendar event for one broadcast."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: BroadcastTime
    duration_minutes: int
    title: str
    description: str
    url: str
