import json
import logging
from pathlib import Path

from config import settings
from models.country import CountryRecord
from services.cache_service import cache

logger = logging.getLogger(__name__)

_CACHE_KEY = "countries:all"


def _load() -> list[CountryRecord]:
    data_path = Path(settings.countries_data_path)
    raw = json.loads(data_path.read_text(encoding="utf-8"))
    countries = [CountryRecord(**c) for c in raw]
    logger.info("Loaded %d countries from %s", len(countries), data_path)
    return countries


def get_all() -> list[CountryRecord]:
    """All country records, in data-store order."""
    return cache.get_or_load(_CACHE_KEY, _load)


async def fetch_countries() -> list[CountryRecord]:
    return get_all()


def get_by_slug(slug: str) -> CountryRecord | None:
    slug = slug.strip().lower()
    return next((c for c in get_all() if c.slug == slug), None)
