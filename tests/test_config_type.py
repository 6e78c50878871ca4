from pathlib import Path

from frpconf.core.config_type import ConfigType, directory_for, parse_type, valid_name


def test_parse_type_exact_match():
    assert parse_type("frpc") is ConfigType.FRPC
    assert parse_type("frps") is ConfigType.FRPS


def test_parse_type_is_case_sensitive_and_has_no_default():
    assert parse_type("FRPC") is None
    assert parse_type("frp") is None
    assert parse_type("") is None
    assert parse_type(None) is None


def test_declaration_order():
    assert [t.type_name for t in ConfigType] == ["frpc", "frps"]


def test_directory_for_does_not_create(tmp_path):
    directory = directory_for(ConfigType.FRPS, tmp_path)
    assert directory == Path(tmp_path) / "frps"
    assert not directory.exists()


def test_valid_name():
    assert valid_name("home.toml")
    assert not valid_name("")
    assert not valid_name("   ")
    assert not valid_name(None)
    assert not valid_name("..")
    assert not valid_name("sub/file.toml")
    assert not valid_name("a\x00b")
