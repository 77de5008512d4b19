import uuid

import pytest

from nvmef.hostid import (
    NQN_PREFIX,
    PATH_DMI_ENTRIES,
    PATH_DMI_PROD_UUID,
    PATH_UUID_IBM,
    UuidUnavailableError,
    hostid_from_file,
    hostnqn_from_file,
    hostnqn_generate,
    system_uuid,
    uuid_from_device_tree,
    uuid_from_dmi_entries,
    uuid_from_product_uuid,
)

SAMPLE_UUID = "12345678-1234-1234-1234-123456789abc"
OTHER_UUID = "abcdefab-cdef-abcd-efab-cdefabcdefab"


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        data = data.encode()
    path.write_bytes(data)
    return path


def _dmi_entry(base, name, entry_type, raw):
    _write(base / name / "type", f"{entry_type}\n")
    _write(base / name / "raw", raw)


def test_product_uuid_read(tmp_path):
    path = _write(tmp_path / "product_uuid", SAMPLE_UUID + "\n")
    assert uuid_from_product_uuid(str(path)) == SAMPLE_UUID


def test_product_uuid_without_newline_rejected(tmp_path):
    path = _write(tmp_path / "product_uuid", SAMPLE_UUID)
    with pytest.raises(UuidUnavailableError):
        uuid_from_product_uuid(str(path))


def test_product_uuid_missing(tmp_path):
    with pytest.raises(UuidUnavailableError):
        uuid_from_product_uuid(str(tmp_path / "absent"))


def test_dmi_entries_byte_order(tmp_path):
    base = tmp_path / "entries"
    _dmi_entry(base, "1-0", 1, bytes(8) + bytes(range(16)))
    assert uuid_from_dmi_entries(str(base)) == "03020100-0504-0706-0809-0a0b0c0d0e0f"


def test_dmi_entries_skip_other_types(tmp_path):
    base = tmp_path / "entries"
    _dmi_entry(base, "0-0", 0, bytes(8) + bytes(range(16)))
    _dmi_entry(base, "2-0", 2, bytes(8) + bytes(range(16)))
    with pytest.raises(UuidUnavailableError):
        uuid_from_dmi_entries(str(base))


def test_dmi_entries_result_is_valid_uuid(tmp_path):
    base = tmp_path / "entries"
    _dmi_entry(base, "0-0", 0, bytes(24))
    _dmi_entry(base, "1-0", 1, bytes(8) + bytes(range(100, 116)))
    result = uuid_from_dmi_entries(str(base))
    assert str(uuid.UUID(result)) == result


def test_dmi_entries_missing_dir(tmp_path):
    with pytest.raises(UuidUnavailableError):
        uuid_from_dmi_entries(str(tmp_path / "none"))


def test_device_tree_stops_at_nul(tmp_path):
    path = _write(tmp_path / "uuid", SAMPLE_UUID.encode() + b"\0")
    assert uuid_from_device_tree(str(path)) == SAMPLE_UUID


def test_device_tree_empty(tmp_path):
    path = _write(tmp_path / "uuid", b"")
    with pytest.raises(UuidUnavailableError):
        uuid_from_device_tree(str(path))


def test_system_uuid_prefers_product_uuid(tmp_path):
    _write(tmp_path / PATH_DMI_PROD_UUID, SAMPLE_UUID + "\n")
    _write(tmp_path / PATH_UUID_IBM, OTHER_UUID)
    assert system_uuid(str(tmp_path)) == SAMPLE_UUID


def test_system_uuid_falls_back_to_device_tree(tmp_path):
    _write(tmp_path / PATH_UUID_IBM, OTHER_UUID)
    assert system_uuid(str(tmp_path)) == OTHER_UUID


def test_system_uuid_dmi_entries_before_device_tree(tmp_path):
    _dmi_entry(tmp_path / PATH_DMI_ENTRIES, "1-0", 1, bytes(8) + bytes(range(16)))
    _write(tmp_path / PATH_UUID_IBM, OTHER_UUID)
    assert system_uuid(str(tmp_path)) != OTHER_UUID
    assert system_uuid(str(tmp_path)) == uuid_from_dmi_entries(
        str(tmp_path / PATH_DMI_ENTRIES)
    )


def test_system_uuid_none_available(tmp_path):
    with pytest.raises(UuidUnavailableError):
        system_uuid(str(tmp_path))


def test_hostnqn_generate_from_system(tmp_path):
    _write(tmp_path / PATH_DMI_PROD_UUID, SAMPLE_UUID + "\n")
    assert hostnqn_generate(str(tmp_path)) == (
        "nqn.2014-08.org.nvmexpress:uuid:" + SAMPLE_UUID
    )


def test_hostnqn_generate_random(tmp_path):
    nqn = hostnqn_generate(str(tmp_path))
    assert nqn.startswith(NQN_PREFIX)
    suffix = nqn[len(NQN_PREFIX):]
    assert str(uuid.UUID(suffix)) == suffix


def test_hostnqn_from_file_first_line(tmp_path):
    path = _write(tmp_path / "hostnqn", "nqn.test:host\nsecond line\n")
    assert hostnqn_from_file(str(path)) == "nqn.test:host"


def test_hostnqn_from_file_missing(tmp_path):
    assert hostnqn_from_file(str(tmp_path / "hostnqn")) is None


def test_hostnqn_from_file_empty(tmp_path):
    path = _write(tmp_path / "hostnqn", "")
    assert hostnqn_from_file(str(path)) is None


def test_hostnqn_from_file_truncated(tmp_path):
    path = _write(tmp_path / "hostnqn", "a" * 400)
    assert hostnqn_from_file(str(path)) == "a" * 222


def test_hostid_from_file(tmp_path):
    path = _write(tmp_path / "hostid", SAMPLE_UUID + "\n")
    assert hostid_from_file(str(path)) == SAMPLE_UUID


def test_hostid_from_file_truncated(tmp_path):
    path = _write(tmp_path / "hostid", SAMPLE_UUID + "extra")
    assert hostid_from_file(str(path)) == SAMPLE_UUID