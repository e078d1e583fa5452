"""
Test the file-backed aquarium store.
"""

import threading
from datetime import timedelta
from pathlib import Path

import pytest

from helpers import NOW, make_aquarium, make_fish
from fishkeeper.data_types import GrowthStage
from fishkeeper.store import AquariumStore, StoreError


def _stocked_aquarium():
    aquarium = make_aquarium([
        make_fish('Koi', custom_name='Sunny', last_bred=NOW - timedelta(days=4)),
        make_fish('Koi', growth=GrowthStage.BABY, base_value=None, hunger=70.0),
    ])
    aquarium.decorations.append('Castle')
    return aquarium


def test_save_then_load_preserves_record(tmp_path: Path):
    store = AquariumStore(tmp_path)
    aquarium = _stocked_aquarium()

    store.save(aquarium)
    loaded = store.load('owner-1')

    assert loaded is not aquarium
    assert loaded.to_dict() == aquarium.to_dict()
    assert loaded.fish[0].last_bred == NOW - timedelta(days=4)
    assert loaded.fish[1].growth is GrowthStage.BABY


def test_missing_owner_loads_none(tmp_path: Path):
    assert AquariumStore(tmp_path).load('nobody') is None


def test_corrupt_record(tmp_path: Path):
    (tmp_path / "owner-1.json").write_text("{not json")

    with pytest.raises(StoreError):
        AquariumStore(tmp_path).load('owner-1')


def test_list_and_delete(tmp_path: Path):
    store = AquariumStore(tmp_path)
    for owner in ('b', 'a'):
        aquarium = make_aquarium()
        aquarium.owner_id = owner
        store.save(aquarium)

    assert store.list_owners() == ['a', 'b']
    assert store.delete('a')
    assert not store.delete('a')
    assert store.list_owners() == ['b']


@pytest.mark.parametrize("owner_id", ["../escaped", "nested/owner", "..\\escaped", ".hidden", ""])
def test_owner_ids_stay_inside_root(tmp_path: Path, owner_id):
    root = tmp_path / "store"
    store = AquariumStore(root)
    aquarium = make_aquarium()
    aquarium.owner_id = owner_id
    (tmp_path / "escaped.json").write_text("{}")

    with pytest.raises(StoreError):
        store.save(aquarium)
    with pytest.raises(StoreError):
        store.load(owner_id)
    with pytest.raises(StoreError):
        store.delete(owner_id)
    with pytest.raises(StoreError):
        with store.session(owner_id):
            pass

    assert (tmp_path / "escaped.json").read_text() == "{}"
    assert list(root.iterdir()) == []
    assert store._locks == {}


def test_delete_forgets_session_lock(tmp_path: Path):
    store = AquariumStore(tmp_path)
    store.save(make_aquarium())

    with store.session('owner-1'):
        pass
    assert 'owner-1' in store._locks

    assert store.delete('owner-1')
    assert 'owner-1' not in store._locks
    assert not store.delete('owner-1')
    assert store._locks == {}


def test_session_saves_on_success(tmp_path: Path):
    store = AquariumStore(tmp_path)
    store.save(make_aquarium(water_quality=40.0))

    with store.session('owner-1') as aquarium:
        aquarium.water_quality = 100.0

    assert store.load('owner-1').water_quality == 100.0


def test_session_discards_on_error(tmp_path: Path):
    store = AquariumStore(tmp_path)
    store.save(make_aquarium(water_quality=40.0))

    with pytest.raises(RuntimeError):
        with store.session('owner-1') as aquarium:
            aquarium.water_quality = 100.0
            raise RuntimeError("handler failed")

    assert store.load('owner-1').water_quality == 40.0


def test_sessions_serialize_read_modify_write(tmp_path: Path):
    store = AquariumStore(tmp_path)
    store.save(make_aquarium(water_quality=0.0))

    def bump():
        for _ in range(5):
            with store.session('owner-1') as aquarium:
                aquarium.water_quality += 1.0

    threads = [threading.Thread(target=bump) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.load('owner-1').water_quality == 40.0
