"""
Determinism tests — the same stock always ages into the same inventory.
"""
import pytest

from gilded_rose.engine import run_simulation
from gilded_rose.fixtures import generate_items, sample_inventory
from gilded_rose.models import SULFURAS, Category
from gilded_rose.store import WAREHOUSE, Store, Warehouse


@pytest.fixture
def sample_items():
    return sample_inventory()


class TestDeterminism:
    def test_same_items_same_hash(self, sample_items):
        r1 = run_simulation(sample_items, days=30)
        r2 = run_simulation(sample_items, days=30)
        assert r1[-1].inventory_hash == r2[-1].inventory_hash

    def test_reports_identical(self, sample_items):
        r1 = run_simulation(sample_items, days=10)
        r2 = run_simulation(sample_items, days=10)
        assert [r.to_dict() for r in r1] == [r.to_dict() for r in r2]

    def test_same_seed_same_items(self):
        assert generate_items(50, seed=7) == generate_items(50, seed=7)

    def test_different_seeds_different_items(self):
        assert generate_items(50, seed=1) != generate_items(50, seed=2)

    def test_generated_items_cover_every_category(self):
        categories = {item.category for item in generate_items(200, seed=42)}
        assert categories == set(Category)

    def test_generate_negative_count_raises(self):
        with pytest.raises(ValueError, match="count must be >= 0"):
            generate_items(-1)


class TestSimulation:
    def test_day_zero_is_stocked_state(self, sample_items):
        reports = run_simulation(sample_items, days=0)
        assert len(reports) == 1
        assert reports[0].items == sample_items

    def test_one_report_per_day(self, sample_items):
        reports = run_simulation(sample_items, days=5)
        assert [r.day for r in reports] == [0, 1, 2, 3, 4, 5]

    def test_known_day_two_values(self, sample_items):
        day_two = run_simulation(sample_items, days=2)[-1].items
        by_index = [(i.name, i.sell_in, i.quality) for i in day_two]
        assert by_index == [
            ("+5 Dexterity Vest", 8, 18),
            ("Aged Brie", 0, 2),
            ("Elixir of the Mongoose", 3, 5),
            (SULFURAS, 0, 80),
            (SULFURAS, -1, 80),
            ("Backstage passes", 13, 22),
            ("Backstage passes", 8, 50),
            ("Backstage passes", 3, 50),
            ("Conjured Mana Cake", 1, 2),
        ]

    def test_default_store_does_not_touch_shared_warehouse(self, sample_items):
        WAREHOUSE.clear()
        run_simulation(sample_items, days=1)
        assert len(WAREHOUSE) == 0

    def test_runs_on_given_store(self, sample_items):
        store = Store(Warehouse())
        run_simulation(sample_items, days=3, store=store)
        assert store.count() == len(sample_items)
        assert store.engine.tick_count == 3

    def test_negative_days_raises(self, sample_items):
        with pytest.raises(ValueError, match="days must be >= 0"):
            run_simulation(sample_items, days=-1)

    def test_long_run_keeps_bounds(self):
        reports = run_simulation(generate_items(100, seed=3), days=60)
        for item in reports[-1].items:
            if item.category is not Category.LEGENDARY:
                assert 0 <= item.quality <= 50
