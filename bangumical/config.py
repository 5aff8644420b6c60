from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for bangumical."""

    model_config = SettingsConfigDict(env_prefix="BANGUMI_", case_sensitive=False)

    # Schedule
    default_season_episode_count: int = Field(
        default=12, description="Episodes assumed for a new anime's season"
    )
    old_anime_extension_months: int = Field(
        default=3,
        description="Months of future broadcasts generated for a continuing anime",
    )
    episode_duration_minutes: int = Field(
        default=24, description="Length of one episode in minutes"
    )
    timezone: str = Field(
        default="Asia/Shanghai",
        description="Timezone whose wall clock the broadcast times are expressed in",
    )

    # Sites
    preferred_site_order: list[str] = Field(
        default=[
            "bilibili",
            "acfun",
            "iqiyi",
            "qq",
            "youku",
            "mgtv",
            "letv",
            "pptv",
            "sohu",
            "netflix",
        ],
        description="Site ids tried in order when picking an event's URL",
    )
    fallback_url: str = Field(
        default="https://bangumi.tv/",
        description="URL used when an anime has no resolvable sites",
    )
    title_locale: str = Field(
        default="zh-Hans", description="Locale of the translated display title"
    )

    # Prompt
    prompt_max_failures: int | None = Field(
        default=3,
        description="Input failures tolerated per question (unbounded when unset)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


settings = Settings()
