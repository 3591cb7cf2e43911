# tests/conftest.py
import json

import pytest


def stats_payload(categories, version=1):
    return {"stats": categories, "dataVersion": version}


@pytest.fixture
def make_stats(tmp_path):
    """Write <root>/<world>/<stats_dir>/<uuid>.json and return its path."""
    def write(world, uuid, payload, stats_dir='stats', root=tmp_path):
        path = root / world / stats_dir / f"{uuid}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding='utf-8')
        return path
    return write


@pytest.fixture
def server(tmp_path, make_stats):
    """Two worlds, one lantern stat each."""
    make_stats('world1', 'uuid-a', stats_payload({"minecraft:custom": {"minecraft:lantern": 7}}))
    make_stats('world2', 'uuid-b', stats_payload({"minecraft:custom": {"minecraft:lantern": 3}}))
    return tmp_path
