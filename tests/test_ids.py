from files_manager.core.ids import ID_LENGTH, is_root, is_valid_id, new_id, normalize_id


def test_accepts_24_hex_chars():
    assert is_valid_id("5f1e7d2c9b8a6f4e3d2c1b0a")
    assert is_valid_id("5F1E7D2C9B8A6F4E3D2C1B0A")


def test_rejects_wrong_length_or_non_hex():
    assert not is_valid_id("xyz")
    assert not is_valid_id("5f1e7d2c9b8a6f4e3d2c1b0")        # 23 chars
    assert not is_valid_id("5f1e7d2c9b8a6f4e3d2c1b0a0")      # 25 chars
    assert not is_valid_id("5f1e7d2c9b8a6f4e3d2c1b0g")
    assert not is_valid_id("")
    assert not is_valid_id(None)
    assert not is_valid_id(123456789012345678901234)


def test_new_ids_are_valid_and_ordered():
    ids = [new_id() for _ in range(200)]
    assert all(len(i) == ID_LENGTH and is_valid_id(i) for i in ids)
    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)


def test_root_sentinel_forms():
    assert is_root(None)
    assert is_root(0)
    assert is_root("0")
    assert not is_root("5f1e7d2c9b8a6f4e3d2c1b0a")


def test_normalize_lowercases_accepted_ids():
    assert normalize_id("5F1E7D2C9B8A6F4E3D2C1B0A") == "5f1e7d2c9b8a6f4e3d2c1b0a"
    assert normalize_id("5f1e7d2c9b8a6f4e3d2c1b0a") == "5f1e7d2c9b8a6f4e3d2c1b0a"
