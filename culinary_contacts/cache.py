"""
Contact lookup cache.

An in-memory map from "<normalized search term>:<source tag>" to the
provider response for that lookup, persisted as a single snapshot in a
diskcache store. The cache is built once per run and injected into the
clients; loading and saving are explicit calls made by the caller.
"""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import diskcache

from culinary_contacts.constants import CACHE_SNAPSHOT_KEY, CACHE_TTL_DAYS, DEFAULT_CACHE_DIR
from culinary_contacts.models import CacheEntry
from culinary_contacts.parsing.text import normalize_key

logger = logging.getLogger(__name__)


def make_key(search_term: str, source_tag: str) -> str:
    return f"{normalize_key(search_term)}:{source_tag}"


def _parse_timestamp(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def _valid_email(record: Any) -> bool:
    return isinstance(record, dict) and bool(record.get("value") or record.get("email"))


def entry_from_dict(key: str, data: Any) -> CacheEntry | None:
    """
    Rebuild a CacheEntry from its snapshot form; None if malformed.

    Malformed means: not a mapping, missing/unparseable timestamp, emails
    not a list, empty emails, or any email record without an address.
    """
    if not isinstance(data, dict):
        return None
    timestamp = _parse_timestamp(data.get("timestamp"))
    emails = data.get("emails")
    if timestamp is None or not isinstance(emails, list) or not emails:
        return None
    if not all(_valid_email(record) for record in emails):
        return None
    company, _, tag = key.rpartition(":")
    return CacheEntry(
        key=key,
        emails=list(emails),
        timestamp=timestamp,
        original_company=str(data.get("originalCompany") or company),
        source_tag=str(data.get("source") or tag),
        linkedin=data.get("linkedin"),
        domain=data.get("domain"),
        size=data.get("size"),
    )


class ContactCache:
    """In-memory lookup cache with an explicit diskcache snapshot."""

    def __init__(
        self,
        snapshot_dir: Path = Path(DEFAULT_CACHE_DIR),
        ttl_days: int = CACHE_TTL_DAYS,
        always_refresh: Iterable[str] = (),
        enabled: bool = True,
        snapshot_key: str = CACHE_SNAPSHOT_KEY,
    ):
        """
        Initialize cache.

        Args:
            snapshot_dir: Directory of the diskcache store holding the snapshot
            ttl_days: Entries older than this are stale and ignored
            always_refresh: Company names whose entries are always evicted
            enabled: If False, every lookup misses and nothing is stored
            snapshot_key: Key of the snapshot inside the diskcache store
        """
        self.snapshot_dir = Path(snapshot_dir)
        self.ttl_days = ttl_days
        self.enabled = enabled
        self.snapshot_key = snapshot_key
        self._always_refresh = {normalize_key(name) for name in always_refresh if name}
        self._entries: dict[str, CacheEntry] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def is_stale(self, entry: CacheEntry, now: datetime | None = None) -> bool:
        return entry.age_days(now) > self.ttl_days

    def should_refresh(self, search_term: str) -> bool:
        return normalize_key(search_term) in self._always_refresh

    def get(
        self, search_term: str, source_tag: str, now: datetime | None = None
    ) -> CacheEntry | None:
        """Cached entry for a lookup; stale and always-refresh entries are evicted and miss."""
        if not self.enabled:
            return None

        if self.should_refresh(search_term):
            self.evict_matching(search_term)
            self.misses += 1
            return None

        key = make_key(search_term, source_tag)
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return None
        if self.is_stale(entry, now):
            logger.debug(f"Cache entry '{key}' is stale, evicting")
            del self._entries[key]
            self.misses += 1
            return None

        self.hits += 1
        logger.debug(f"Cache hit for '{key}' ({len(entry.emails)} emails)")
        return entry

    def put(
        self,
        search_term: str,
        source_tag: str,
        emails: list[dict],
        original_company: str = "",
        linkedin: str | None = None,
        domain: str | None = None,
        size: str | None = None,
        now: datetime | None = None,
    ) -> CacheEntry | None:
        """Store a non-empty lookup result. Returns the entry, or None if nothing was stored."""
        if not self.enabled or not emails:
            return None
        key = make_key(search_term, source_tag)
        entry = CacheEntry(
            key=key,
            emails=list(emails),
            timestamp=now or datetime.now(UTC),
            original_company=original_company or search_term,
            source_tag=source_tag,
            linkedin=linkedin,
            domain=domain,
            size=size,
        )
        self._entries[key] = entry
        logger.debug(f"Cached {len(emails)} emails under '{key}' ({len(self._entries)} entries)")
        return entry

    def evict_matching(self, name: str) -> int:
        """Remove every entry whose key contains the normalized name."""
        needle = normalize_key(name)
        if not needle:
            return 0
        doomed = [key for key in self._entries if needle in key]
        for key in doomed:
            del self._entries[key]
        if doomed:
            logger.info(f"Evicted {len(doomed)} cache entries matching '{name}'")
        return len(doomed)

    def _always_refreshed(self, entry: CacheEntry) -> bool:
        company = entry.key.rpartition(":")[0]
        return company in self._always_refresh or (
            normalize_key(entry.original_company) in self._always_refresh
        )

    def load(self, now: datetime | None = None) -> int:
        """
        Replace the in-memory map with the persisted snapshot.

        Malformed, stale and always-refresh entries are dropped individually.
        An unreadable snapshot is logged and leaves the cache empty.

        Returns:
            Number of entries loaded
        """
        self._entries.clear()
        if not self.enabled:
            logger.info("Cache disabled: skipping snapshot load")
            return 0

        try:
            with diskcache.Cache(str(self.snapshot_dir)) as store:
                data = store.get(self.snapshot_key)
        except Exception as e:
            logger.warning(f"Could not read cache snapshot from {self.snapshot_dir}: {e}")
            return 0

        if not data:
            logger.info("No cache snapshot found, starting with an empty cache")
            return 0
        if not isinstance(data, dict):
            logger.warning(f"Ignoring cache snapshot of unexpected type {type(data).__name__}")
            return 0

        malformed = stale = refreshed = 0
        for key, value in data.items():
            entry = entry_from_dict(str(key), value)
            if entry is None:
                malformed += 1
            elif self.is_stale(entry, now):
                stale += 1
            elif self._always_refreshed(entry):
                refreshed += 1
            else:
                self._entries[entry.key] = entry

        logger.info(
            f"Loaded {len(self._entries)} cache entries "
            f"(dropped {malformed} malformed, {stale} stale, {refreshed} always-refresh)"
        )
        return len(self._entries)

    def save(self) -> int:
        """
        Persist entries that hold at least one email.

        Returns:
            Number of entries written
        """
        if not self.enabled:
            return 0
        snapshot = {key: entry.to_dict() for key, entry in self._entries.items() if entry.emails}
        self.snapshot_dir.mkdir(parents=True, exist_ok=True)
        with diskcache.Cache(str(self.snapshot_dir)) as store:
            store.set(self.snapshot_key, snapshot)
        logger.info(f"Saved {len(snapshot)} cache entries to {self.snapshot_dir}")
        return len(snapshot)

    def clear(self, persist: bool = True) -> int:
        """Drop every entry, and the persisted snapshot when persist is True."""
        count = len(self._entries)
        self._entries.clear()
        if persist and self.snapshot_dir.exists():
            with diskcache.Cache(str(self.snapshot_dir)) as store:
                store.delete(self.snapshot_key)
        logger.info(f"Cleared {count} cache entries")
        return count

    def entries(self) -> list[CacheEntry]:
        return list(self._entries.values())

    def stats(self) -> dict:
        """Get cache statistics."""
        by_source: dict[str, int] = {}
        for entry in self._entries.values():
            by_source[entry.source_tag] = by_source.get(entry.source_tag, 0) + 1
        return {
            "enabled": self.enabled,
            "total": len(self._entries),
            "by_source": by_source,
            "emails": sum(len(entry.emails) for entry in self._entries.values()),
            "hits": self.hits,
            "misses": self.misses,
            "ttl_days": self.ttl_days,
            "snapshot_dir": str(self.snapshot_dir),
        }


def build_cache(settings=None) -> ContactCache:
    """Construct the run's cache from settings."""
    if settings is None:
        from culinary_contacts.config import get_settings

        settings = get_settings()
    return ContactCache(
        snapshot_dir=settings.cache_dir,
        ttl_days=settings.cache_ttl_days,
        always_refresh=settings.always_refresh_companies,
        enabled=settings.cache_enabled,
    )
