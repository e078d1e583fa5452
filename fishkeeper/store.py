"""
Aquarium persistence.

One JSON document per owner under a root directory. The engine never calls
this module; handlers load, run a catch-up pass, mutate, and save.

Read-modify-write atomicity per owner comes from session(): it holds a
per-owner lock for the whole load/mutate/save sequence, so two concurrent
catch-up passes cannot both read the same stale last_maintenance.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .data_types import Aquarium

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class StoreError(Exception):
    """Raised when a stored aquarium cannot be read"""
    pass


class AquariumStore:
    """File-backed aquarium store keyed by owner id"""

    def __init__(self, root: Path):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _path_for(self, owner_id: str) -> Path:
        """Record path for an owner; ids that would leave the root are rejected"""
        owner_id = str(owner_id)
        if not owner_id or owner_id.startswith('.') or '/' in owner_id or '\\' in owner_id:
            raise StoreError(f"Invalid owner id: {owner_id!r}")
        path = self.root / f"{owner_id}.json"
        if path.resolve().parent != self.root.resolve():
            raise StoreError(f"Invalid owner id: {owner_id!r}")
        return path

    def _lock_for(self, owner_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(owner_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[owner_id] = lock
            return lock

    def load(self, owner_id: str) -> Optional[Aquarium]:
        """Load an owner's aquarium, or None if they have none"""
        path = self._path_for(owner_id)
        if not path.exists():
            return None

        try:
            with open(path, 'r') as f:
                data = json.load(f)
            return Aquarium.from_dict(data['aquarium'])
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise StoreError(f"Corrupt aquarium record {path}: {e}")

    def save(self, aquarium: Aquarium):
        """Write an aquarium, replacing the previous document atomically"""
        path = self._path_for(aquarium.owner_id)
        document = {
            'schema_version': SCHEMA_VERSION,
            'aquarium': aquarium.to_dict(),
        }

        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, 'w') as f:
                json.dump(document, f, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.debug("Saved aquarium for %s (%d fish)", aquarium.owner_id, len(aquarium.fish))

    def delete(self, owner_id: str) -> bool:
        """Remove an owner's record and forget their session lock"""
        path = self._path_for(owner_id)
        with self._lock_for(owner_id):
            existed = path.exists()
            if existed:
                path.unlink()
        with self._locks_guard:
            self._locks.pop(owner_id, None)
        return existed

    def list_owners(self) -> List[str]:
        return sorted(p.stem for p in self.root.glob("*.json") if not p.name.startswith("."))

    @contextmanager
    def session(self, owner_id: str) -> Iterator[Optional[Aquarium]]:
        """
        Exclusive load/mutate/save for one owner.

        Yields the loaded aquarium (None if absent). The aquarium is saved on
        normal exit and discarded if the block raises.

        Example:
            with store.session(user_id) as aquarium:
                apply_maintenance(aquarium, now, config, rng)
                feed_fish(aquarium)
        """
        self._path_for(owner_id)
        with self._lock_for(owner_id):
            aquarium = self.load(owner_id)
            yield aquarium
            if aquarium is not None:
                self.save(aquarium)
