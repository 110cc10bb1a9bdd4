"""Tests for EffectCatalog: default fallback, promotion policies and CRUD."""

import threading

import pytest
from pydantic import ValidationError

from enchant_gen.defaults import DEFAULT_BASE_POTENCY, DEFAULT_EFFECTS
from enchant_gen.engine.catalog import CatalogSettings, DefaultPolicy, EffectCatalog
from enchant_gen.ir import CatalogData, ItemKind, ItemType


# ---------------------------------------------------------------------------
# Lazy policy (default)
# ---------------------------------------------------------------------------

class TestLazyEffects:
    def test_reads_defaults_without_promoting(self):
        catalog = EffectCatalog()
        assert catalog.get_effect("minecraft:sharpness") is DEFAULT_EFFECTS["minecraft:sharpness"]
        assert len(catalog) == len(DEFAULT_EFFECTS)
        assert not catalog.effects_owned

    def test_put_promotes_and_keeps_defaults(self, make_record):
        catalog = EffectCatalog()
        catalog.put_effect(make_record("test:new"))
        assert catalog.effects_owned
        assert "test:new" in catalog
        assert "minecraft:sharpness" in catalog
        assert "test:new" not in DEFAULT_EFFECTS

    def test_remove_default_key_promotes(self):
        catalog = EffectCatalog()
        catalog.remove_effect("minecraft:mending")
        assert catalog.effects_owned
        assert catalog.get_effect("minecraft:mending") is None
        assert "minecraft:mending" in DEFAULT_EFFECTS

    def test_remove_unknown_key_does_not_promote(self):
        catalog = EffectCatalog()
        catalog.remove_effect("test:ghost")
        assert not catalog.effects_owned
        assert len(catalog) == len(DEFAULT_EFFECTS)

    def test_without_defaults_starts_empty(self, make_record):
        catalog = EffectCatalog(CatalogSettings(use_default_effects=False))
        assert len(catalog) == 0
        assert catalog.get_effect("minecraft:sharpness") is None
        catalog.remove_effect("minecraft:sharpness")
        assert not catalog.effects_owned
        catalog.put_effect(make_record("test:a"))
        assert catalog.effect_ids() == ("test:a",)

    def test_catalogs_are_independent(self):
        a = EffectCatalog()
        b = EffectCatalog()
        a.remove_effect("minecraft:sharpness")
        assert "minecraft:sharpness" not in a
        assert "minecraft:sharpness" in b


class TestLazyPotency:
    def test_reads_defaults(self):
        catalog = EffectCatalog()
        assert catalog.get_potency("minecraft:golden_helmet") == 25
        assert not catalog.potency_owned

    def test_put_default_value_does_not_promote(self):
        catalog = EffectCatalog()
        catalog.put_potency("minecraft:golden_helmet", 25)
        assert not catalog.potency_owned

    def test_put_new_value_promotes(self):
        catalog = EffectCatalog()
        catalog.put_potency("minecraft:golden_helmet", 30)
        assert catalog.potency_owned
        assert catalog.get_potency("minecraft:golden_helmet") == 30
        assert catalog.get_potency("minecraft:iron_sword") == 14
        assert DEFAULT_BASE_POTENCY["minecraft:golden_helmet"] == 25

    def test_remove_unknown_item_does_not_promote(self):
        catalog = EffectCatalog()
        catalog.remove_potency("minecraft:stick")
        assert not catalog.potency_owned

    def test_remove_default_item(self):
        catalog = EffectCatalog()
        catalog.remove_potency("minecraft:book")
        assert catalog.potency_owned
        assert catalog.get_potency("minecraft:book") is None

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_potency_rejected(self, value):
        catalog = EffectCatalog()
        with pytest.raises(ValueError, match="must be positive"):
            catalog.put_potency("minecraft:stick", value)
        assert not catalog.potency_owned


# ---------------------------------------------------------------------------
# Eager policy
# ---------------------------------------------------------------------------

class TestEagerPolicy:
    def test_owned_from_construction(self):
        catalog = EffectCatalog(CatalogSettings(default_policy=DefaultPolicy.EAGER))
        assert catalog.effects_owned
        assert catalog.potency_owned
        assert len(catalog) == len(DEFAULT_EFFECTS)
        assert catalog.get_potency("minecraft:bow") == 1

    def test_remove_does_not_touch_defaults(self):
        catalog = EffectCatalog(CatalogSettings(default_policy=DefaultPolicy.EAGER))
        catalog.remove_effect("minecraft:sharpness")
        catalog.remove_potency("minecraft:bow")
        assert "minecraft:sharpness" not in catalog
        assert "minecraft:sharpness" in DEFAULT_EFFECTS
        assert "minecraft:bow" in DEFAULT_BASE_POTENCY

    def test_eager_without_defaults(self):
        catalog = EffectCatalog(
            CatalogSettings(
                default_policy=DefaultPolicy.EAGER,
                use_default_effects=False,
                use_default_potency=False,
            )
        )
        assert catalog.effects_owned
        assert len(catalog) == 0
        assert catalog.get_potency("minecraft:bow") is None

    def test_settings_are_frozen(self):
        settings = CatalogSettings()
        with pytest.raises(ValidationError):
            settings.thread_safe = True


# ---------------------------------------------------------------------------
# Queries and bulk loading
# ---------------------------------------------------------------------------

class TestQueries:
    def test_base_potency_of_unknown_item_is_zero(self, stick):
        assert EffectCatalog().base_potency(stick) == 0

    def test_base_potency_of_known_item(self, diamond_sword):
        assert EffectCatalog().base_potency(diamond_sword) == 10

    def test_put_replaces_same_id(self, empty_catalog, make_record):
        empty_catalog.put_effect(make_record("test:a", weight=1))
        empty_catalog.put_effect(make_record("test:a", weight=7))
        assert len(empty_catalog) == 1
        assert empty_catalog.get_effect("test:a").weight == 7

    def test_effects_snapshot_order(self, empty_catalog, make_record):
        for effect_id in ("test:c", "test:a", "test:b"):
            empty_catalog.put_effect(make_record(effect_id))
        assert [r.id for r in empty_catalog.effects()] == ["test:c", "test:a", "test:b"]

    def test_load(self, empty_catalog, make_record):
        data = CatalogData(
            effects=[make_record("test:a"), make_record("test:b")],
            base_potency={"test:wand": 12},
            items=[ItemKind(id="test:wand", kind=ItemType.OTHER)],
        )
        empty_catalog.load(data)
        assert set(empty_catalog.effect_ids()) == {"test:a", "test:b"}
        assert empty_catalog.get_potency("test:wand") == 12

    def test_repr(self):
        assert "effects_owned=False" in repr(EffectCatalog())


class TestThreadSafety:
    def test_concurrent_writers(self, make_record):
        catalog = EffectCatalog(CatalogSettings(thread_safe=True, use_default_effects=False))
        records = [make_record(f"test:{i}") for i in range(200)]

        def writer(chunk):
            for record in chunk:
                catalog.put_effect(record)

        threads = [
            threading.Thread(target=writer, args=(records[i::4],)) for i in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(catalog) == 200

    def test_thread_safe_load_reenters_lock(self, make_record):
        catalog = EffectCatalog(CatalogSettings(thread_safe=True))
        catalog.load(CatalogData(effects=[make_record("test:a")]))
        assert "test:a" in catalog
