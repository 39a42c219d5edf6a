"""
Unit tests for the file-backed local storage and the JSON application store.
"""

import json
import shutil
import tempfile
from pathlib import Path

import pytest

from dog_license.adapters import APPLICATIONS_KEY, JsonApplicationStore, LocalStorage
from dog_license.domain import ApplicationForm, ApplicationRecord
from dog_license.infra.exceptions import CorruptedStorageError, StorageQuotaExceededError, StoreError
from dog_license.infra.serialization import Serializer


class TestLocalStorage:
    """localStorage-like string slots on disk"""

    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.path = self.temp_dir / "local_storage.json"
        self.storage = LocalStorage(self.path)

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_missing_file_is_empty(self):
        assert self.storage.get_item("anything") is None
        assert self.storage.keys() == []
        assert self.storage.used_bytes() == 0

    def test_set_and_get(self):
        self.storage.set_item("greeting", "hello")
        assert self.storage.get_item("greeting") == "hello"
        assert self.path.exists()
        assert json.loads(self.path.read_text(encoding="utf-8")) == {"greeting": "hello"}

    def test_values_survive_a_new_instance(self):
        self.storage.set_item("a", "1")
        assert LocalStorage(self.path).get_item("a") == "1"

    def test_remove_and_clear(self):
        self.storage.set_item("a", "1")
        self.storage.set_item("b", "2")
        self.storage.remove_item("a")
        assert self.storage.keys() == ["b"]
        self.storage.remove_item("missing")
        self.storage.clear()
        assert self.storage.keys() == []

    def test_quota_exceeded_leaves_content_unchanged(self):
        storage = LocalStorage(self.path, quota_bytes=50)
        storage.set_item("a", "x" * 10)
        before = self.path.read_text(encoding="utf-8")

        with pytest.raises(StorageQuotaExceededError) as exc_info:
            storage.set_item("b", "y" * 100)

        assert exc_info.value.error_code == "STORAGE_QUOTA_EXCEEDED"
        assert isinstance(exc_info.value, StoreError)
        assert self.path.read_text(encoding="utf-8") == before
        assert storage.get_item("b") is None

    def test_used_bytes_counts_keys_and_values(self):
        self.storage.set_item("ab", "cde")
        assert self.storage.used_bytes() == 5

    def test_corrupted_file(self):
        self.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CorruptedStorageError):
            self.storage.get_item("a")

    def test_non_string_values_are_corrupted(self):
        self.path.write_text('{"a": 1}', encoding="utf-8")
        with pytest.raises(CorruptedStorageError):
            self.storage.keys()


class TestJsonApplicationStore:
    """Application list in a single storage slot"""

    @pytest.fixture(autouse=True)
    def _store(self, draft_factory):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.storage = LocalStorage(self.temp_dir / "local_storage.json")
        self.store = JsonApplicationStore(self.storage)
        self.records = [
            ApplicationRecord.create(
                ApplicationForm.from_draft(draft_factory(dog_name=name, license_period=period)),
                f"DOG-170406720000{i}-{i * 11}",
                f"2024-01-01T00:00:0{i}.000Z",
            )
            for i, (name, period) in enumerate([("Rex", "1-year"), ("Bella", "3-year"), ("Max", "2-year")])
        ]
        yield
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_empty_slot(self):
        assert self.store.key == APPLICATIONS_KEY
        assert self.store.load_raw() == []
        assert self.store.load_all() == []

    def test_round_trip_preserves_order(self):
        self.store.save_all(self.records)
        loaded = self.store.load_all()
        assert loaded == self.records
        assert [r.dog_name for r in loaded] == ["Rex", "Bella", "Max"]

    def test_slot_holds_compact_camel_case_array(self):
        self.store.save_all(self.records[:1])
        raw = self.storage.get_item(APPLICATIONS_KEY)
        assert raw.startswith('[{"trackingNumber":"DOG-1704067200000-0","ownerFirstName":"Jane"')
        assert raw == Serializer.dumps([self.records[0].to_storage()])

    def test_rewrite_is_byte_identical(self):
        self.store.save_all(self.records)
        first = self.storage.get_item(APPLICATIONS_KEY)
        self.store.save_all(self.store.load_all())
        assert self.storage.get_item(APPLICATIONS_KEY) == first

    def test_find_by_tracking_number(self):
        self.store.save_all(self.records)
        found = self.store.find_by_tracking_number(self.records[1].tracking_number)
        assert found == self.records[1]
        assert self.store.find_by_tracking_number("DOG-0-0") is None
        assert self.store.find_by_tracking_number(self.records[1].tracking_number.lower()) is None

    @pytest.mark.parametrize("raw", ["not json", '{"a":1}', "42"])
    def test_corrupted_slot(self, raw):
        self.storage.set_item(APPLICATIONS_KEY, raw)
        with pytest.raises(CorruptedStorageError):
            self.store.load_all()

    def test_malformed_record_fails_full_load(self):
        self.storage.set_item(APPLICATIONS_KEY, '[{"trackingNumber":"DOG-1-1"}]')
        with pytest.raises(CorruptedStorageError) as exc_info:
            self.store.load_all()
        assert exc_info.value.details["index"] == 0

    def test_find_ignores_unrelated_malformed_entries(self):
        items = [r.to_storage() for r in self.records[:2]]
        items.insert(1, {"trackingNumber": "DOG-2-2", "dogName": "Legacy"})
        self.store.save_raw(items)

        assert self.store.find_by_tracking_number(self.records[1].tracking_number) == self.records[1]
        assert self.store.find_by_tracking_number("DOG-9-9") is None
        with pytest.raises(CorruptedStorageError):
            self.store.find_by_tracking_number("DOG-2-2")

    def test_append_keeps_existing_entries_verbatim(self):
        existing = '[{"trackingNumber":"DOG-1-1","dogAge":3,"note":"x"},"not a record"]'
        self.storage.set_item(APPLICATIONS_KEY, existing)

        assert self.store.append(self.records[0]) == 3

        raw = self.storage.get_item(APPLICATIONS_KEY)
        assert raw.startswith(existing[:-1] + ",")
        assert raw == existing[:-1] + "," + Serializer.dumps(self.records[0].to_storage()) + "]"

    def test_append(self):
        assert self.store.append(self.records[0]) == 1
        assert self.store.append(self.records[1]) == 2
        assert self.store.load_all() == self.records[:2]

    def test_other_slots_untouched(self):
        self.storage.set_item("theme", "dark")
        self.store.save_all(self.records)
        assert self.storage.get_item("theme") == "dark"
