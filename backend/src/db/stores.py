"""
Flat-file stores backing the prompt catalog.

Every store reads and writes its whole file per call. Blocking file I/O runs in
a worker thread via asyncio.to_thread, so two requests can interleave between
a read and the matching write. Without serialize_writes the last write wins.
"""
import asyncio
import csv
import json
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.config import Settings
from models.metadata import CatalogMetadata
from models.prompt import PromptRecord
from services.exceptions import CuratedSourceError, StoreWriteError

logger = logging.getLogger(__name__)

CURATED_HEADER = ("act", "prompt")


class JsonFileStore:
    """
    A JSON document persisted as one file.

    Missing or unparseable files read as the store's default value so that the
    service keeps serving after a partial data loss.
    """

    def __init__(
        self,
        path: Path,
        default_factory: Callable[[], Any],
        *,
        expected_type: type,
        serialize_writes: bool = False,
        strict_writes: bool = False,
    ) -> None:
        self.path = path
        self.default_factory = default_factory
        self.expected_type = expected_type
        self.strict_writes = strict_writes
        self._lock = asyncio.Lock() if serialize_writes else None

    async def read(self) -> Any:
        """Read and parse the file, falling back to the default value."""
        return await asyncio.to_thread(self._read_sync)

    async def write(self, data: Any) -> None:
        """
        Replace the file contents with the serialized data.

        When strict_writes is off, a failed write is logged and swallowed and the
        caller proceeds as if it succeeded. Client and server state can then
        diverge silently.
        """
        try:
            await asyncio.to_thread(self._write_sync, data)
        except OSError as e:
            if self.strict_writes:
                raise StoreWriteError(str(self.path), str(e)) from e
            logger.exception("Error writing %s; continuing without persisting", self.path)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Guard a read-modify-write cycle; a no-op unless writes are serialized."""
        if self._lock is None:
            yield
            return
        async with self._lock:
            yield

    def ensure_exists(self) -> bool:
        """Create the file with its default value if absent. Returns True if created."""
        if self.path.exists():
            return False
        self._write_sync(self.default_factory())
        return True

    def _read_sync(self) -> Any:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("%s not found, using default", self.path)
            return self.default_factory()
        except OSError:
            logger.exception("Error reading %s, using default", self.path)
            return self.default_factory()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("%s holds invalid JSON, using default", self.path)
            return self.default_factory()
        if not isinstance(data, self.expected_type):
            logger.warning(
                "%s holds %s, expected %s; using default",
                self.path, type(data).__name__, self.expected_type.__name__,
            )
            return self.default_factory()
        return data

    def _write_sync(self, data: Any) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


class RecordStore(JsonFileStore):
    """A JSON array of prompt records."""

    def __init__(self, path: Path, **kwargs: Any) -> None:
        super().__init__(path, list, expected_type=list, **kwargs)

    async def load(self) -> list[PromptRecord]:
        """Load records, skipping entries that are not JSON objects with an id."""
        data = await self.read()
        return [item for item in data if isinstance(item, dict) and isinstance(item.get("id"), str)]

    async def save(self, records: list[PromptRecord]) -> None:
        """Persist the full record sequence."""
        await self.write(records)


class MetadataStore(JsonFileStore):
    """The favorites/usage metadata document."""

    def __init__(self, path: Path, **kwargs: Any) -> None:
        super().__init__(path, lambda: CatalogMetadata().to_dict(), expected_type=dict, **kwargs)

    async def load(self) -> CatalogMetadata:
        """Load metadata, defaulting to no favorites and zero usage."""
        return CatalogMetadata.from_dict(await self.read())

    async def save(self, metadata: CatalogMetadata) -> None:
        """Persist the metadata document."""
        await self.write(metadata.to_dict())


class CuratedSource:
    """
    Read-only CSV of curated prompts with at least `act` and `prompt` columns.

    Unlike the JSON stores this source does not self-heal at request time: a
    missing or malformed file fails the request.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    async def read_rows(self) -> list[dict[str, str]]:
        """Return non-blank CSV rows as header-keyed dicts, in file order."""
        return await asyncio.to_thread(self._read_rows_sync)

    def ensure_exists(self) -> bool:
        """Create a header-only CSV if absent. Returns True if created."""
        if self.path.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8", newline="") as f:
            csv.writer(f).writerow(CURATED_HEADER)
        return True

    def _read_rows_sync(self) -> list[dict[str, str]]:
        try:
            with self.path.open(encoding="utf-8-sig", newline="") as f:
                reader = csv.DictReader(f)
                fieldnames = reader.fieldnames or []
                missing = [name for name in CURATED_HEADER if name not in fieldnames]
                if missing:
                    raise CuratedSourceError(
                        f"{self.path} is missing column(s): {', '.join(missing)}",
                    )
                return [
                    {key: value for key, value in row.items() if key is not None}
                    for row in reader
                ]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise CuratedSourceError(f"Failed to read {self.path}: {e}") from e


@dataclass
class CatalogStores:
    """The four persisted collections the catalog is built from."""

    curated: CuratedSource
    vip: RecordStore
    custom: RecordStore
    metadata: MetadataStore

    @classmethod
    def from_settings(cls, settings: Settings) -> "CatalogStores":
        """Build stores rooted at the configured data directory."""
        options = {
            "serialize_writes": settings.serialize_writes,
            "strict_writes": settings.strict_writes,
        }
        return cls(
            curated=CuratedSource(settings.curated_path),
            vip=RecordStore(settings.vip_path, **options),
            custom=RecordStore(settings.custom_path, **options),
            metadata=MetadataStore(settings.metadata_path, **options),
        )

    def ensure_data_files(self) -> list[Path]:
        """Create any missing data file with empty/default content. Returns created paths."""
        created = []
        for store in (self.curated, self.vip, self.custom, self.metadata):
            if store.ensure_exists():
                logger.info("Created default data file %s", store.path)
                created.append(store.path)
        return created
