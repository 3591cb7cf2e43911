import json
from pathlib import Path
from typing import NamedTuple

UNKNOWN_WORLD = 'Unknown'


class StatsFormatError(ValueError):
    pass


class StatsDocument(NamedTuple):
    categories: dict | None
    data_version: int = 0


class LoadedEntry(NamedTuple):
    document: StatsDocument
    path: Path


class LoadOutcome(NamedTuple):
    path: Path
    document: StatsDocument | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_stats_document(text: str) -> StatsDocument | None:
    """
    Parse one stats file. Top-level field names are matched case-insensitively;
    a literal `null` document returns None. Raises json.JSONDecodeError or
    StatsFormatError on bad content.
    """
    data = json.loads(text)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise StatsFormatError(f"expected a JSON object, got {type(data).__name__}")

    raw_stats, version = None, 0
    for key, value in data.items():
        name = key.lower()
        if name == 'stats':
            raw_stats = value
        elif name == 'dataversion':
            if not _is_int(value):
                raise StatsFormatError(f"dataVersion must be an integer, got {value!r}")
            version = value

    if raw_stats is None:
        return StatsDocument(None, version)
    if not isinstance(raw_stats, dict):
        raise StatsFormatError("stats must be an object of categories")

    categories = {}
    for category, items in raw_stats.items():
        if items is None:
            categories[category] = None
            continue
        if not isinstance(items, dict):
            raise StatsFormatError(f"category {category!r} must be an object")
        for item, value in items.items():
            if not _is_int(value):
                raise StatsFormatError(
                    f"value for {category!r}/{item!r} must be an integer, got {value!r}")
        categories[category] = dict(items)
    return StatsDocument(categories, version)


def load_stats_file(path) -> LoadOutcome:
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8-sig')
        return LoadOutcome(path, parse_stats_document(text))
    except (OSError, UnicodeDecodeError, ValueError, RecursionError) as e:
        # JSONDecodeError and StatsFormatError are both ValueErrors;
        # deeply nested input overflows the decoder with RecursionError
        return LoadOutcome(path, error=str(e))


def labels_for(path):
    """(world, uuid) for .../<world>/stats/<uuid>.json"""
    path = Path(path)
    world = path.parent.parent.name or UNKNOWN_WORLD
    return world, path.stem


def store_entry(store: dict, world: str, uuid: str, entry: LoadedEntry) -> None:
    """
    Put entry under (world, uuid), comparing both keys case-insensitively.
    An existing entry is replaced outright; the label casing seen first is kept.
    """
    world_rec = store.setdefault(world.lower(), {'name': world, 'entities': {}})
    entities = world_rec['entities']
    prior = entities.get(uuid.lower())
    entities[uuid.lower()] = {
        'name': prior['name'] if prior else uuid,
        'entry': entry,
    }


def load_world_stats(paths, log=print) -> dict:
    """
    Build the world store: {world_key: {'name', 'entities': {uuid_key: {'name', 'entry'}}}}.
    Files that fail to load are reported through `log` and skipped.
    """
    store = {}
    for path in paths:
        outcome = load_stats_file(path)
        if not outcome.ok:
            log(f"Error processing file {outcome.path}: {outcome.error}")
            continue
        if outcome.document is None:
            continue
        world, uuid = labels_for(outcome.path)
        store_entry(store, world, uuid, LoadedEntry(outcome.document, outcome.path))
    log("File processing complete.")
    return store
