import json
import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import map_gen
from biomes import get_biome
from clearings import Clearing
from grid import Grid
from map_gen import (
    CLEARING_OVERLAP, UNREACHABLE, GenerationError, MapGenerator, generate_map,
)


def test_woodland_end_to_end():
    result = generate_map("woodland", seed=42)
    grid = Grid()

    assert (result.cols, result.rows) == (50, 37)
    assert result.seed == 42
    assert result.biome_id == "woodland"

    assert len(result.clearings) == 3
    for c in result.clearings:
        assert 5 <= c.width <= 6 and 5 <= c.height <= 6

    rows_with_water = {grid.from_key(k)[1] for k in result.water.cells}
    assert rows_with_water == set(range(result.rows))
    assert result.water.crossing
    assert result.water.crossing <= result.water.cells

    if any(b.is_berry for b in result.decorations.bushes):
        assert result.item_spawn_points["berries"]

    assert result.house_plot_position == result.clearings[0].center
    assert result.start_clearing is result.clearings[0]
    assert len(result.water_tiles) == len(result.water.cells - result.water.crossing)


def test_desert_has_ponds_and_no_crossing():
    result = generate_map("desert", seed=42)
    assert result.water.kind == "oasis"
    assert 2 <= len(result.water.ponds) <= 3
    assert result.water.crossing == frozenset()
    assert len(result.obstacles.get_by_kind("water")) == len(result.water.cells)


def test_same_seed_same_map():
    first = generate_map("woodland", seed=2024).to_dict()
    second = generate_map("woodland", seed=2024).to_dict()
    assert first == second
    assert generate_map("woodland", seed=2025).to_dict() != first


def test_missing_seed_is_picked_and_recorded():
    generator = MapGenerator(get_biome("desert"))
    assert 1 <= generator.seed <= 99999
    assert generator.generate().seed == generator.seed


def test_result_is_json_serializable():
    data = generate_map("desert", seed=8).to_dict()
    text = json.dumps(data)
    assert json.loads(text)["biome"] == "desert"
    assert len(data["terrain"]["kinds"]) == 37


def test_unknown_biome_id_falls_back_to_woodland():
    assert generate_map("swamp", seed=3).biome_id == "woodland"


def test_uncrossable_river_is_rejected(monkeypatch):
    calls = []

    def no_crossing(grid, cells):
        calls.append(1)
        return frozenset()

    monkeypatch.setattr(map_gen, "place_crossing", no_crossing)
    with pytest.raises(GenerationError) as err:
        generate_map("woodland", seed=5, max_attempts=4)
    assert err.value.kind == UNREACHABLE
    assert len(calls) == 4


def test_retry_recovers_from_a_broken_run(monkeypatch):
    real = map_gen.place_crossing
    calls = []

    def flaky(grid, cells):
        calls.append(1)
        return frozenset() if len(calls) == 1 else real(grid, cells)

    monkeypatch.setattr(map_gen, "place_crossing", flaky)
    result = generate_map("woodland", seed=5)
    assert len(calls) == 2
    assert result.water.crossing


def test_clearing_on_water_is_rejected(monkeypatch):
    real = map_gen.place_clearings

    def flooded(grid, rng):
        # A band across the whole map always hits the river
        band = Clearing(left=1, top=1, right=48, bottom=3, cx=1600.0, cy=160.0)
        return real(grid, rng) + [band]

    monkeypatch.setattr(map_gen, "place_clearings", flooded)
    with pytest.raises(GenerationError) as err:
        generate_map("woodland", seed=6, max_attempts=2)
    assert err.value.kind == CLEARING_OVERLAP


def test_zero_attempts_is_a_usage_error():
    with pytest.raises(ValueError):
        MapGenerator(get_biome("woodland"), seed=1).generate(max_attempts=0)
