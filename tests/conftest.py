import pytest
from whenever import Instant

from bangumical.config import Settings
from bangumical.models import AnimeRecord, SiteMeta

TZ = "Asia/Shanghai"


@pytest.fixture
def fixed_now():
    """Provide a fixed time for testing: Wednesday 2025-01-01 20:00 (+08:00)."""
    return Instant.from_utc(2025, 1, 1, 12, 0, 0).to_tz(TZ)


@pytest.fixture
def config():
    """Settings with small, predictable schedule values."""
    return Settings(
        default_season_episode_count=3,
        old_anime_extension_months=1,
        episode_duration_minutes=24,
        preferred_site_order=["bilibili", "iqiyi"],
        fallback_url="https://bangumi.tv/",
        title_locale="zh-Hans",
        prompt_max_failures=3,
    )


@pytest.fixture
def site_table():
    """Site metadata table in bangumi-data layout."""
    return {
        "bilibili": SiteMeta(
            title="哔哩哔哩",
            urlTemplate="https://www.bilibili.com/bangumi/media/md{{id}}/",
            type="onair",
        ),
        "iqiyi": SiteMeta(
            title="爱奇艺",
            urlTemplate="https://www.iqiyi.com/{{id}}.html",
            type="onair",
        ),
        "bangumi": SiteMeta(
            title="番组计划",
            urlTemplate="https://bangumi.tv/subject/{{id}}",
            type="info",
        ),
        "untitled": SiteMeta(title="", urlTemplate="https://example.com/{{id}}"),
    }


@pytest.fixture
def make_anime():
    """Factory for AnimeRecords with sensible defaults."""

    def _make_anime(**overrides) -> AnimeRecord:
        fields = {
            "title": "Test Anime",
            "begin": Instant.from_utc(2025, 1, 6, 12, 0, 0),  # Monday 20:00 +08:00
            "isNew": True,
            "sites": [],
        }
        fields.update(overrides)
        return AnimeRecord.model_validate(fields)

    return _make_anime
