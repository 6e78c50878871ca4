from frpconf.core.listing import VirtualRow, describe_one, list_all


def test_list_all_empty_root(tmp_path):
    assert list_all(tmp_path) == []
    assert not (tmp_path / "frpc").exists()
    assert not (tmp_path / "frps").exists()


def test_list_all_ids_span_types(tmp_path, make_entry):
    make_entry("frpc", "a1.ini")
    make_entry("frps", "b1.ini")
    make_entry("frps", "b2.ini")

    rows = list_all(tmp_path)

    assert [row.id for row in rows] == [0, 1, 2]
    assert [row.type for row in rows] == ["frpc", "frps", "frps"]
    assert rows[0].name == "a1.ini"
    assert {row.name for row in rows[1:]} == {"b1.ini", "b2.ini"}


def test_list_all_skips_missing_directory(tmp_path, make_entry):
    make_entry("frps", "only.toml")
    assert list_all(tmp_path) == [VirtualRow(0, "frps", "only.toml")]


def test_describe_one_existing(tmp_path, make_entry):
    make_entry("frpc", "home.toml")
    assert describe_one(tmp_path, "frpc", "home.toml") == VirtualRow(0, "frpc", "home.toml")


def test_describe_one_missing_is_none(tmp_path, make_entry):
    make_entry("frpc", "home.toml")
    assert describe_one(tmp_path, "frpc", "missing.ini") is None
    assert describe_one(tmp_path, "nope", "home.toml") is None
    assert describe_one(tmp_path, "frpc", "  ") is None
    assert describe_one(tmp_path, None, "home.toml") is None


def test_describe_one_rejects_parent_reference(tmp_path, make_entry):
    make_entry("frpc", "home.toml")
    assert describe_one(tmp_path, "frpc", "..") is None
