"""Tests for the JSON product store.

These tests verify:
- Newest-first ordering and unique ids
- Partial updates (blank description, image replacement)
- Not-found handling leaves the file untouched
- Fail-soft loading of missing or corrupt files
"""

import json

import pytest

from shopfront.products import ProductNotFound, ProductStore


def read(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class TestProductStore:
    """Test ProductStore functionality."""

    @pytest.fixture
    def path(self, tmp_path):
        return str(tmp_path / "products.json")

    @pytest.fixture
    def store(self, path):
        return ProductStore(path)

    def test_list_missing_file_is_empty(self, store):
        assert store.list() == []

    def test_list_corrupt_file_is_empty(self, store, path):
        with open(path, "w", encoding="utf-8") as f:
            f.write("{not json")

        assert store.list() == []

    def test_list_non_array_is_empty(self, store, path):
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"id": "x"}, f)

        assert store.list() == []

    def test_non_record_entries_are_skipped(self, store, path):
        with open(path, "w", encoding="utf-8") as f:
            json.dump([None, "junk", {"id": "a", "imagePath": None, "description": "Mug"}], f)

        assert store.list() == [{"id": "a", "imagePath": None, "description": "Mug"}]
        assert store.get("a")["description"] == "Mug"
        store.update("a", description="Cup")
        assert store.remove("a")["description"] == "Cup"
        assert store.list() == []

    def test_add_newest_first(self, store):
        red = store.add("Red Mug")

        assert store.list() == [{"id": red["id"], "imagePath": None, "description": "Red Mug"}]

        store.add("Blue Cup")
        assert [p["description"] for p in store.list()] == ["Blue Cup", "Red Mug"]

    def test_add_trims_description(self, store):
        product = store.add("  Teapot \n", "/uploads/a.png")

        assert product["description"] == "Teapot"
        assert product["imagePath"] == "/uploads/a.png"

    def test_add_assigns_unique_ids(self, store):
        ids = [store.add(f"item {i}")["id"] for i in range(25)]

        assert len(set(ids)) == 25
        assert {p["id"] for p in store.list()} == set(ids)

    def test_file_is_indented_json(self, store, path):
        store.add("Red Mug")

        with open(path, encoding="utf-8") as f:
            text = f.read()
        assert text.startswith("[\n  {")

    def test_update_description(self, store):
        product = store.add("Red Mug")

        updated, replaced = store.update(product["id"], description=" Green Mug ")

        assert updated["description"] == "Green Mug"
        assert replaced is None
        assert store.get(product["id"])["description"] == "Green Mug"

    @pytest.mark.parametrize("description", [None, "", "   \t"])
    def test_update_blank_description_keeps_existing(self, store, description):
        product = store.add("Red Mug")

        store.update(product["id"], description=description)

        assert store.get(product["id"])["description"] == "Red Mug"

    def test_update_image_reports_replaced_path(self, store):
        product = store.add("Red Mug", "/uploads/old.png")

        updated, replaced = store.update(product["id"], image_path="/uploads/new.png")

        assert replaced == "/uploads/old.png"
        assert updated["imagePath"] == "/uploads/new.png"
        assert updated["id"] == product["id"]

    def test_update_without_image_keeps_image(self, store):
        product = store.add("Red Mug", "/uploads/old.png")

        _, replaced = store.update(product["id"], description="Mug")

        assert replaced is None
        assert store.get(product["id"])["imagePath"] == "/uploads/old.png"

    def test_update_unknown_id_leaves_file_unchanged(self, store, path):
        store.add("Red Mug")
        before = read(path)

        with pytest.raises(ProductNotFound):
            store.update("missing", description="Anything")

        assert read(path) == before

    def test_remove(self, store):
        red = store.add("Red Mug", "/uploads/red.png")
        blue = store.add("Blue Cup")

        removed = store.remove(red["id"])

        assert removed["imagePath"] == "/uploads/red.png"
        assert store.list() == [blue]

    def test_remove_unknown_id(self, store, path):
        store.add("Red Mug")
        before = read(path)

        with pytest.raises(ProductNotFound):
            store.remove("missing")

        assert read(path) == before

    def test_disk_matches_simulation(self, store, path):
        """Run a mixed sequence and compare the file with an in-memory model after each step."""
        model = []

        def check():
            assert read(path) == model

        a = store.add("A")
        model.insert(0, dict(a))
        check()

        b = store.add("B", "/uploads/b.png")
        model.insert(0, dict(b))
        check()

        store.update(a["id"], description="A2", image_path="/uploads/a.png")
        model[1].update(description="A2", imagePath="/uploads/a.png")
        check()

        c = store.add("C")
        model.insert(0, dict(c))
        check()

        store.update(b["id"], description="  ")
        check()

        store.remove(b["id"])
        model = [p for p in model if p["id"] != b["id"]]
        check()

        store.remove(c["id"])
        model = [p for p in model if p["id"] != c["id"]]
        check()
