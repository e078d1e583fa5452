"""
Smoke test for scripts/simulate_absence.py
"""

import importlib.util
import json
from pathlib import Path

import pytest

from helpers import DATA_ROOT, NOW, make_aquarium, make_fish
from fishkeeper.store import AquariumStore

SCRIPT = Path(__file__).parent.parent.parent / "scripts" / "simulate_absence.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("simulate_absence", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_demo_run_prints_json(script, capsys):
    assert script.main(['--days', '3', '--json', '--data-root', str(DATA_ROOT)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out['summary']['elapsed_days'] == pytest.approx(3.0, abs=1e-3)
    assert out['aquarium']['water_quality'] < 100
    assert len(out['aquarium']['fish']) <= 10


def test_demo_run_is_seeded(script, capsys):
    args = ['--days', '5', '--json', '--seed', '7', '--data-root', str(DATA_ROOT)]

    script.main(args)
    first = json.loads(capsys.readouterr().out)
    script.main(args)
    second = json.loads(capsys.readouterr().out)

    fish_of = lambda doc: [(f['name'], f['growth']) for f in doc['aquarium']['fish']]
    assert fish_of(first) == fish_of(second)
    assert first['summary']['born'] == second['summary']['born']


def test_stored_owner_round_trip(script, tmp_path: Path, capsys):
    store = AquariumStore(tmp_path)
    aquarium = make_aquarium([make_fish()])
    aquarium.type_name = 'Basic Aquarium'
    aquarium.capacity = 5
    store.save(aquarium)

    code = script.main(['--store', str(tmp_path), '--owner', 'owner-1', '--days', '2',
                        '--save', '--data-root', str(DATA_ROOT)])

    assert code == 0
    assert "[OK] Saved aquarium for owner-1" in capsys.readouterr().out
    assert store.load('owner-1').last_maintenance > NOW


def test_unknown_owner_fails(script, tmp_path: Path, capsys):
    code = script.main(['--store', str(tmp_path), '--owner', 'ghost',
                        '--data-root', str(DATA_ROOT)])

    assert code == 1
    assert "[FAIL]" in capsys.readouterr().err
