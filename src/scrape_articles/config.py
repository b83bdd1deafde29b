"""Configuration loader for scrape_articles."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "SCRAPER_CONFIG"

MODES = ("rich", "simple")


@dataclass
class OutputConfig:
    path: str = "articles.csv"


@dataclass
class RequestConfig:
    timeout: float | None = None  # None waits indefinitely
    user_agent: str = "news-scraper/1.0"


@dataclass
class SelectorConfig:
    entry: str = "#MainContent_ctl00_pnlLajmet .portfolio-grid"
    entry_image: str = ".port-img img"
    entry_link: str = "h3 a"
    entry_date: str = ".caption .date"
    article_title: str = "h3"
    content_start: str = "div#div_print p.semibold"
    content_stop: str = "div.tz-gallery"
    gallery_image: str = "div.tz-gallery a.lightbox img"


@dataclass
class Config:
    base_url: str = "https://md.rks-gov.net"
    index_path: str = "/page.aspx?id=1,15"
    mode: str = "rich"  # "rich" or "simple"
    output: OutputConfig = field(default_factory=OutputConfig)
    request: RequestConfig = field(default_factory=RequestConfig)
    selectors: SelectorConfig = field(default_factory=SelectorConfig)

    @property
    def index_url(self) -> str:
        return self.base_url + self.index_path

    @property
    def is_rich(self) -> bool:
        return self.mode == "rich"


def load_config(config_name: str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses SCRAPER_CONFIG env var or "prod".

    Returns:
        Loaded Config object
    """
    if config_name is None:
        config_name = os.environ.get(CONFIG_ENV_VAR, "prod")

    config_path = CONFIG_DIR / f"{config_name}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return _parse_config(data)


def _parse_config(data: dict) -> Config:
    """Parse config dictionary into Config object."""
    defaults = SelectorConfig()
    selector_data = data.get("selectors") or {}
    output_data = data.get("output") or {}
    request_data = data.get("request") or {}
    selectors = SelectorConfig(
        **{
            name: selector_data.get(name, getattr(defaults, name))
            for name in defaults.__dataclass_fields__
        }
    )

    output = OutputConfig(
        path=output_data.get("path", "articles.csv"),
    )

    request = RequestConfig(
        timeout=request_data.get("timeout"),
        user_agent=request_data.get("user_agent", "news-scraper/1.0"),
    )

    mode = data.get("mode", "rich")
    if mode not in MODES:
        raise ValueError(f"Unknown mode {mode!r}. Valid modes: {', '.join(MODES)}")

    return Config(
        base_url=data.get("base_url", "https://md.rks-gov.net"),
        index_path=data.get("index_path", "/page.aspx?id=1,15"),
        mode=mode,
        output=output,
        request=request,
        selectors=selectors,
    )


# Global config instance (loaded on first access)
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (lazy-loaded)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Config):
    """Set the global configuration (useful for testing)."""
    global _config
    _config = config


def reset_config():
    """Reset the global configuration (forces reload on next access)."""
    global _config
    _config = None
