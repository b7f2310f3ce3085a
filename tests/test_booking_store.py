import json

import pytest

from chikitsamitra.services.booking_store import BookingPersistenceError, BookingStore

from conftest import sample_booking


def test_missing_key_reads_empty(booking_store):
    assert booking_store.load() == []


@pytest.mark.parametrize("raw", ["not json", "{\"a\": 1}", "42", "null", ""])
def test_unreadable_value_reads_empty(booking_store, fake_redis, raw):
    fake_redis.data["cm_bookings_v1"] = raw
    assert booking_store.load() == []


def test_corrupt_entries_are_skipped(booking_store, fake_redis):
    good = sample_booking().to_record()
    fake_redis.data["cm_bookings_v1"] = json.dumps([good, {"name": "no reference"}, "junk", good])

    loaded = booking_store.load()

    assert len(loaded) == 2
    assert all(booking.reference == "CM-000001" for booking in loaded)


def test_append_keeps_existing_entries(booking_store, fake_redis):
    booking_store.append(sample_booking(reference="CM-000001"))
    booking_store.append(sample_booking(reference="CM-000002"))

    stored = json.loads(fake_redis.data["cm_bookings_v1"])
    assert [record["reference"] for record in stored] == ["CM-000001", "CM-000002"]


def test_records_use_camel_case_keys(booking_store, fake_redis):
    booking_store.append(sample_booking(appointment_type="Video"))

    record = json.loads(fake_redis.data["cm_bookings_v1"])[0]
    assert set(record) == {
        "id", "reference", "name", "phone", "dob", "gender", "appointmentType",
        "state", "district", "hospital", "department", "date", "timeslot", "createdAt",
    }
    assert record["appointmentType"] == "Video"


def test_read_errors_degrade_to_empty(booking_store, fake_redis):
    booking_store.append(sample_booking())
    fake_redis.fail_reads = True

    assert booking_store.load() == []


def test_append_refuses_to_overwrite_unreadable_list(booking_store, fake_redis):
    booking_store.append(sample_booking())
    fake_redis.fail_reads = True

    with pytest.raises(BookingPersistenceError) as exc_info:
        booking_store.append(sample_booking(reference="CM-000002"))
    assert exc_info.value.status_code == 503

    fake_redis.fail_reads = False
    assert len(booking_store.load()) == 1


def test_write_errors_raise(booking_store, fake_redis):
    fake_redis.fail_writes = True
    with pytest.raises(BookingPersistenceError):
        booking_store.append(sample_booking())


def test_raw_records_are_kept_as_sent(fake_redis):
    store = BookingStore(fake_redis, "cm_bookings_server_v1")
    store.append_record({"reference": "CM-1", "extra": True})

    assert json.loads(fake_redis.data["cm_bookings_server_v1"]) == [{"reference": "CM-1", "extra": True}]
