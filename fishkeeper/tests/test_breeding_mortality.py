"""
Test the breeding matcher and mortality evaluator in isolation.
"""

from datetime import timedelta

import pytest

from helpers import ALWAYS, NEVER, NOW, ScriptedRandom, make_aquarium, make_fish
from fishkeeper.breeding import cooldown_elapsed, find_mate, is_breeding_ready, make_offspring
from fishkeeper.data_types import GrowthStage
from fishkeeper.mortality import should_die


class TestFindMate:

    def test_first_eligible_match_wins(self):
        candidate = make_fish(happiness=90.0, hunger=80.0)
        first = make_fish(happiness=75.0, hunger=55.0, custom_name='First')
        second = make_fish(happiness=100.0, hunger=100.0, custom_name='Second')
        aquarium = make_aquarium([candidate, first, second])

        assert find_mate(candidate, aquarium, NOW) is first

    def test_candidate_never_matches_itself(self):
        candidate = make_fish(happiness=90.0, hunger=80.0)
        aquarium = make_aquarium([candidate])

        assert find_mate(candidate, aquarium, NOW) is None

    def test_identical_twin_is_a_valid_mate(self):
        # Equal field values, different individuals
        candidate = make_fish(happiness=90.0, hunger=80.0)
        twin = make_fish(happiness=90.0, hunger=80.0)
        aquarium = make_aquarium([candidate, twin])

        assert candidate == twin
        assert find_mate(candidate, aquarium, NOW) is twin

    @pytest.mark.parametrize(
        "overrides",
        [
            pytest.param({'name': 'Carp'}, id="other-species"),
            pytest.param({'growth': GrowthStage.JUVENILE}, id="not-adult"),
            pytest.param({'happiness': 70.0}, id="happiness-at-threshold"),
            pytest.param({'hunger': 50.0}, id="hunger-at-threshold"),
            pytest.param({'last_bred': NOW - timedelta(days=3)}, id="cooldown-exactly-3-days"),
        ],
    )
    def test_ineligible_mates_are_skipped(self, overrides):
        candidate = make_fish(happiness=90.0, hunger=80.0)
        fields = dict(happiness=90.0, hunger=80.0)
        fields.update(overrides)
        aquarium = make_aquarium([candidate, make_fish(**fields)])

        assert find_mate(candidate, aquarium, NOW) is None


def test_cooldown_boundary():
    fish = make_fish(last_bred=NOW - timedelta(days=3, seconds=1))
    assert cooldown_elapsed(fish, NOW)
    fish.last_bred = NOW - timedelta(days=3)
    assert not cooldown_elapsed(fish, NOW)
    fish.last_bred = None
    assert cooldown_elapsed(fish, NOW)


def test_breeding_ready_requires_all_conditions():
    assert is_breeding_ready(make_fish(happiness=71.0, hunger=51.0), NOW)
    assert not is_breeding_ready(make_fish(happiness=71.0, hunger=51.0,
                                           growth=GrowthStage.BABY), NOW)


def test_offspring_inherits_species_attributes():
    parent = make_fish('Marlin', size='Huge', rarity='Epic', value=250, base_value=25.0,
                       custom_name='Big Mama')

    baby = make_offspring(parent)

    assert baby.name == 'Marlin'
    assert baby.size == 'Huge'
    assert baby.rarity == 'Epic'
    assert baby.base_value == 25.0
    assert baby.value == 25
    assert baby.custom_name is None
    assert baby.growth is GrowthStage.BABY


class TestShouldDie:

    def test_healthy_fish_never_rolls(self):
        rng = ScriptedRandom(default=ALWAYS)
        assert not should_die(50.0, 5.0, 1.0, rng)
        assert not should_die(5.0, 10.0, 1.0, rng)
        assert rng.draws == 0

    def test_neglected_fish_rolls(self):
        assert should_die(9.9, 9.9, 1.0, ScriptedRandom(default=ALWAYS))
        assert not should_die(9.9, 9.9, 1.0, ScriptedRandom(default=NEVER))

    def test_chance_scales_with_elapsed_days(self):
        # 0.2 per day: 0.3 fails at one day, succeeds at two
        assert not should_die(0.0, 0.0, 1.0, ScriptedRandom([0.3]))
        assert should_die(0.0, 0.0, 2.0, ScriptedRandom([0.3]))

    def test_long_absence_is_certain_death(self):
        assert should_die(0.0, 0.0, 10.0, ScriptedRandom(default=NEVER))
