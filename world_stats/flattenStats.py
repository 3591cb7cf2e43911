from pathlib import Path
from typing import NamedTuple


class FlatRecord(NamedTuple):
    world: str
    uuid: str
    category: str
    item: str
    value: int
    path: Path


def flatten_world_stats(store: dict) -> list[FlatRecord]:
    """
    One record per (world, uuid, category, item) in the store, nothing dropped
    or merged. Null category maps contribute no records.
    """
    records = []
    for world_rec in store.values():
        world = world_rec['name']
        for entity in world_rec['entities'].values():
            uuid, entry = entity['name'], entity['entry']
            if entry is None or entry.document is None or entry.document.categories is None:
                continue
            for category, items in entry.document.categories.items():
                if items is None: continue
                for item, value in items.items():
                    records.append(FlatRecord(world, uuid, category, item, value, entry.path))
    return records
