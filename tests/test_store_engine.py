"""Tests for the whole-document record store."""

import json
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from lavender_stays.models import RestaurantOrder, RestaurantOrderInput, Room, RoomInput
from lavender_stays.storage import InMemoryStorage, StorageReadError, StorageWriteError
from lavender_stays.store import RecordNotFoundError, RecordStore, new_record_id, utc_now


@pytest.fixture
def room_fields(room_payload):
    return RoomInput.model_validate(room_payload).to_fields()


class TestSeeding:
    """Tests for first start and damaged documents."""

    def test_missing_document_is_seeded_and_persisted(self, store, storage):
        """A missing document is created from seed data right away."""
        data = store.load()

        assert [room.id for room in data.rooms] == ["1", "2", "3", "4"]
        assert [booking.id for booking in data.booking_requests] == [
            "B001",
            "B002",
            "B003",
            "B004",
        ]
        assert data.restaurant_orders == []
        assert data.hotel_settings.id == "singleton"
        assert data.hotel_settings.currency_symbol == "₹"
        assert storage.write_count == 1

    def test_persisted_layout(self, store, storage):
        """The document uses camelCase keys, two-space indentation and raw UTF-8."""
        store.initialize()

        assert storage.content.startswith('{\n  "rooms": [')
        assert "₹" in storage.content
        document = json.loads(storage.content)
        assert list(document) == [
            "rooms",
            "bookingRequests",
            "restaurantOrders",
            "menuItems",
            "housekeepingTasks",
            "guestServiceRequests",
            "hotelSettings",
        ]
        assert document["rooms"][0]["data-ai-hint"] == "modern bedroom"

    def test_malformed_document_falls_back_without_writing(self, clock):
        """Unparseable content yields seed data but is left untouched."""
        storage = InMemoryStorage("{not json")
        store = RecordStore(storage, clock=clock)

        data = store.load()

        assert len(data.rooms) == 4
        assert storage.content == "{not json"
        assert storage.write_count == 0

    def test_blank_document_falls_back_to_seed(self, clock):
        storage = InMemoryStorage("   \n")
        store = RecordStore(storage, clock=clock)

        assert len(store.load().booking_requests) == 4
        assert storage.write_count == 0

    def test_read_failure_falls_back_to_seed(self, clock):
        """Storage read errors are logged and seed data is served."""
        storage = Mock()
        storage.read.side_effect = StorageReadError("disk unplugged")
        store = RecordStore(storage, clock=clock)

        data = store.load()

        assert len(data.rooms) == 4
        storage.write.assert_not_called()

    def test_seed_write_failure_still_returns_seed(self, clock):
        storage = Mock()
        storage.read.return_value = None
        storage.write.side_effect = StorageWriteError("read-only filesystem")
        store = RecordStore(storage, clock=clock)

        assert len(store.load().rooms) == 4

    def test_legacy_document_keeps_unknown_fields(self, legacy_document, clock):
        """Older documents load, and fields this version does not know survive a rewrite."""
        storage = InMemoryStorage(legacy_document)
        store = RecordStore(storage, clock=clock)

        data = store.load()
        assert data.guest_service_requests == []
        store.save(data)

        document = json.loads(storage.content)
        assert document["rooms"][0]["floor"] == 7
        assert document["guestServiceRequests"] == []


class TestInvalidRecords:
    """Tests for documents that parse as JSON but hold records this version rejects."""

    @pytest.fixture
    def damaged_document(self, legacy_document):
        document = json.loads(legacy_document)
        document["rooms"][0]["name"] = "Renamed By Admin"
        document["bookingRequests"].append({"id": "bk_partial", "guestName": "Old"})
        document["loyaltyMembers"] = [{"email": "alice@example.com", "tier": "gold"}]
        return document

    def test_valid_records_are_served(self, damaged_document, clock):
        """Only the invalid record is hidden; the rest of the document is used as stored."""
        store = RecordStore(InMemoryStorage(json.dumps(damaged_document)), clock=clock)

        data = store.load()

        assert [room.name for room in data.rooms] == ["Renamed By Admin"]
        assert [booking.id for booking in data.booking_requests] == ["bk_1718000000001_ef34gh"]
        assert data.unreadable_records == {
            "bookingRequests": [{"id": "bk_partial", "guestName": "Old"}]
        }

    def test_write_keeps_every_record(self, damaged_document, clock, room_fields):
        """A mutation after loading writes the set-aside record and admin edits back."""
        storage = InMemoryStorage(json.dumps(damaged_document))
        store = RecordStore(storage, clock=clock)

        store.insert("rooms", Room, room_fields, "room_")

        document = json.loads(storage.content)
        assert [room["name"] for room in document["rooms"]][0] == "Renamed By Admin"
        assert len(document["rooms"]) == 2
        assert document["bookingRequests"][-1] == {"id": "bk_partial", "guestName": "Old"}
        assert len(document["menuItems"]) == 2

    def test_unknown_top_level_keys_survive_delete(self, damaged_document, clock):
        storage = InMemoryStorage(json.dumps(damaged_document))
        store = RecordStore(storage, clock=clock)

        store.delete("menu_items", "menu_1718000000002_ij56kl")

        document = json.loads(storage.content)
        assert document["loyaltyMembers"] == [{"email": "alice@example.com", "tier": "gold"}]
        assert list(document)[-1] == "loyaltyMembers"

    def test_invalid_settings_are_kept_aside(self, damaged_document, clock):
        damaged_document["hotelSettings"] = "broken"
        storage = InMemoryStorage(json.dumps(damaged_document))
        store = RecordStore(storage, clock=clock)

        data = store.load()
        assert data.hotel_settings is None
        store.save(data)

        assert json.loads(storage.content)["hotelSettings"] == "broken"

    def test_new_id_skips_set_aside_ids(self, clock, room_fields):
        storage = InMemoryStorage(json.dumps({"rooms": [{"id": "room_taken"}]}))
        store = RecordStore(storage, clock=clock, id_factory=Mock(side_effect=["room_taken", "room_fresh"]))

        record = store.insert("rooms", Room, room_fields, "room_")

        assert record.id == "room_fresh"
        assert [room["id"] for room in json.loads(storage.content)["rooms"]] == [
            "room_fresh",
            "room_taken",
        ]

    def test_json_that_is_not_an_object_falls_back_to_seed(self, clock):
        storage = InMemoryStorage("[1, 2, 3]")
        store = RecordStore(storage, clock=clock)

        assert len(store.load().rooms) == 4
        assert storage.write_count == 0


class TestInsert:
    """Tests for appending records."""

    def test_insert_round_trip(self, store, room_fields):
        """A created record is listed with a fresh id and matching timestamps."""
        record = store.insert("rooms", Room, room_fields, "room_")

        rooms = store.list_records("rooms")
        assert rooms[-1] == record
        assert record.id.startswith("room_")
        assert record.created_at == record.updated_at
        assert record.name == "Test Room"

    def test_stamped_fields_use_creation_time(self, store, order_payload):
        fields = RestaurantOrderInput.model_validate(order_payload).to_fields()
        record = store.insert(
            "restaurant_orders", RestaurantOrder, fields, "order_", ("orderTime",)
        )

        assert record.order_time == record.created_at

    def test_id_collision_is_retried(self, storage, clock, room_fields):
        """A generated id that already exists is replaced by a new one."""
        id_factory = Mock(side_effect=["1", "room_fresh"])
        store = RecordStore(storage, clock=clock, id_factory=id_factory)

        record = store.insert("rooms", Room, room_fields, "room_")

        assert record.id == "room_fresh"
        assert [room.id for room in store.list_records("rooms")].count("1") == 1

    def test_write_failure_leaves_document_unchanged(self, clock, room_fields):
        storage = InMemoryStorage()
        store = RecordStore(storage, clock=clock)
        store.initialize()
        before = storage.content
        storage.write = Mock(side_effect=StorageWriteError("quota exceeded"))

        with pytest.raises(StorageWriteError):
            store.insert("rooms", Room, room_fields, "room_")

        assert storage.content == before
        assert len(store.list_records("rooms")) == 4

    def test_concurrent_inserts_are_not_lost(self, store, room_fields):
        """Parallel creates in one process all land in the document."""
        store.initialize()

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(
                pool.map(
                    lambda _: store.insert("rooms", Room, dict(room_fields), "room_"),
                    range(20),
                )
            )

        rooms = store.list_records("rooms")
        assert len(rooms) == 24
        assert len({room.id for room in rooms}) == 24


class TestUpdateAndDelete:
    """Tests for changing and removing records."""

    def test_update_refreshes_updated_at(self, store):
        original = store.find("booking_requests", "B001")

        def confirm(fields, now):
            fields["status"] = "CONFIRMED"
            return fields

        updated = store.update("booking_requests", "B001", confirm)

        assert updated.status == "CONFIRMED"
        assert updated.created_at == original.created_at
        assert updated.updated_at > original.updated_at

    def test_update_unknown_id_raises_and_writes_nothing(self, store, storage):
        store.initialize()
        writes = storage.write_count

        with pytest.raises(RecordNotFoundError) as exc_info:
            store.update("rooms", "missing", lambda fields, now: fields)

        assert exc_info.value.record_id == "missing"
        assert storage.write_count == writes

    def test_delete_removes_only_that_record(self, store):
        removed = store.delete("rooms", "2")

        assert removed.id == "2"
        assert [room.id for room in store.list_records("rooms")] == ["1", "3", "4"]

    def test_delete_unknown_id_raises(self, store):
        with pytest.raises(RecordNotFoundError):
            store.delete("rooms", "nonexistent-id")
        assert len(store.list_records("rooms")) == 4

    def test_transaction_discards_changes_on_error(self, store, storage):
        store.initialize()
        writes = storage.write_count

        with pytest.raises(RuntimeError):
            with store.transaction() as data:
                data.rooms.clear()
                raise RuntimeError("abort")

        assert storage.write_count == writes
        assert len(store.list_records("rooms")) == 4


class TestReads:
    """Tests for read consistency and durability."""

    def test_reads_are_idempotent(self, store):
        assert store.list_records("rooms") == store.list_records("rooms")

    def test_mutations_survive_a_fresh_store(self, store, storage, clock, room_fields):
        """A new store over the same storage sees every committed change."""
        created = store.insert("rooms", Room, room_fields, "room_")
        store.delete("booking_requests", "B002")

        restarted = RecordStore(storage, clock=clock)

        assert restarted.find("rooms", created.id) == created
        assert restarted.find("booking_requests", "B002") is None

    def test_find_returns_none_for_unknown_id(self, store):
        assert store.find("menu_items", "nope") is None


class TestHelpers:
    def test_new_record_id_has_prefix(self):
        first, second = new_record_id("task_"), new_record_id("task_")
        assert first.startswith("task_")
        assert first != second

    def test_utc_now_format(self):
        assert utc_now().endswith("Z")
        assert "+00:00" not in utc_now()
