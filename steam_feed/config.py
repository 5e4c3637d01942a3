"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: news endpoint and HTTP settings
- FilterConfig: article skip policy
- SanitizeConfig: per-article content patches
- LayoutConfig: list layout tuning constants and font identifiers
- DisplayConfig: date timezone and viewport size
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any
from urllib.parse import urlencode

import yaml


# Known duplicate or retracted news posts.
DEFAULT_SKIP_GIDS = (
    "5410576585124650573",
    "2436926440562370340",
    "2284879949508460627",
    "2163281492537211231",
    "2152021858901922963",
    "2152021858894636598",
    "2486412956120074597",
    "3044845282402408345",
    "4249665521681179987",
    "4249665521681180090",
    "4249665521681180188",
    "295352659733029280",
    "377538916270267899",
    "378660375673380952",
    "371902438121350491",
    "405678801273981156",
    "409053962649582461",
    "518256108464071258",
    "517128413774920296",
    "517127039058316220",
    "515998514243691390",
    "517122602985592706",
    "517122602980080996",
    "511492468646310449",
    "521624142113331755",
)


@dataclass
class FetchConfig:
    """Configuration for the news feed request.

    Attributes:
        base_url: GetNewsForApp endpoint
        app_id: Steam app identifier sent as ``appid``
        count: Number of news items requested
        timeout_seconds: HTTP request timeout
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
    """

    base_url: str = "https://api.steampowered.com/ISteamNews/GetNewsForApp/v2/"
    app_id: int = 322170
    count: int = 300
    timeout_seconds: float = 20.0
    trust_env: bool = True
    user_agent: str = "SteamFeed/0.1 (news overlay)"

    @property
    def url(self) -> str:
        return f"{self.base_url}?{urlencode({'appid': self.app_id, 'count': self.count})}"


@dataclass
class FilterConfig:
    """Configuration for which feed records are never shown.

    Attributes:
        skip_gids: Article ids dropped before construction
        excluded_gid: One further id dropped after construction
    """

    skip_gids: list[str] = field(default_factory=lambda: list(DEFAULT_SKIP_GIDS))
    excluded_gid: str | None = "5410576585126249016"


@dataclass
class SanitizeConfig:
    """Per-article content patches applied by the sanitizer.

    Attributes:
        slash_strip_gid: Article whose text has every ``/`` removed
        image_gid: Article whose text has ``image_markup`` removed
        image_markup: Literal removed from ``image_gid``; brackets are
            already stripped by the time this runs
    """

    slash_strip_gid: str | None = "5218041989051270041"
    image_gid: str | None = "5124585319850001325"
    image_markup: str = (
        "img{STEAM_CLAN_IMAGE}/7432088/4fcada2e76dd5b2839d84e420a53315d8e078f98.png"
    )


@dataclass
class LayoutConfig:
    """Tuning constants for the scrollable news list.

    Attributes:
        padding: Inset applied on both sides of a wrapped title
        base_height: Height added to every block on top of its content
        wrap_buffer: Added to the wrap comparison; negative favours longer lines
        spacing_steps: ``[min_newlines, spacing]`` pairs, highest threshold first
        default_spacing: Spacing when no step matches
        side_margin: Viewport width not available to a block
        title_font: Font identifier used to measure titles
        content_font: Font identifier used to measure content
        title_line_height: Extra content offset per wrapped title line
    """

    padding: float = 40.0
    base_height: float = 50.0
    wrap_buffer: float = -100.0
    spacing_steps: list[list[float]] = field(
        default_factory=lambda: [[10, 125.0], [5, 90.0], [2, 40.0]]
    )
    default_spacing: float = 25.0
    side_margin: float = 150.0
    title_font: str = "goldFont.fnt"
    content_font: str = "chatFont.fnt"
    title_line_height: float = 20.0

    def __post_init__(self) -> None:
        for name in ("padding", "base_height", "side_margin", "title_line_height"):
            if getattr(self, name) < 0:
                raise ValueError(f"layout.{name} must not be negative")
        thresholds = [step[0] for step in self.spacing_steps]
        if thresholds != sorted(thresholds, reverse=True):
            raise ValueError("spacing_steps must be ordered by descending threshold")
        values = [step[1] for step in self.spacing_steps] + [self.default_spacing]
        if values != sorted(values, reverse=True):
            raise ValueError("spacing must not decrease as the newline count grows")


@dataclass
class DisplayConfig:
    """Configuration for the feed view.

    Attributes:
        timezone: "local" or "utc"; calendar used for published dates
        viewport_width: Width of the overlay
        viewport_height: Height of the overlay
    """

    timezone: str = "local"
    viewport_width: float = 1280.0
    viewport_height: float = 720.0

    def __post_init__(self) -> None:
        if self.timezone.lower() not in ("local", "utc"):
            raise ValueError("display.timezone must be \"local\" or \"utc\"")
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ValueError("display viewport size must be positive")


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "steam_feed.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    filters: FilterConfig = field(default_factory=FilterConfig)
    sanitize: SanitizeConfig = field(default_factory=SanitizeConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        block_width = self.display.viewport_width - self.layout.side_margin
        if block_width - 2 * self.layout.padding <= 0:
            raise ValueError("viewport_width leaves no room for titles after side_margin and padding")


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    if not isinstance(raw, dict):
        raise ValueError("Invalid config: top level must be a mapping of sections")
    data = asdict(base)
    for key, value in raw.items():
        if key not in data or value is None:
            continue
        if not isinstance(value, dict):
            raise ValueError(f"Invalid config: section '{key}' must be a mapping")
        data[key].update({k: v for k, v in value.items() if k in data[key]})
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        filters=FilterConfig(**data["filters"]),
        sanitize=SanitizeConfig(**data["sanitize"]),
        layout=LayoutConfig(**data["layout"]),
        display=DisplayConfig(**data["display"]),
        logging=LoggingConfig(**data["logging"]),
    )
