import pytest

from kernelsim.config import Config, load_config


def _write(tmp_path, text):
    path = tmp_path / "module.config"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_reads_keys_and_values(tmp_path):
    path = _write(tmp_path, "IP_MEMORIA=127.0.0.1\nPUERTO_MEMORIA=8002\n")
    config = load_config(path)
    assert config.get_string("IP_MEMORIA") == "127.0.0.1"
    assert config.get_string("PUERTO_MEMORIA") == "8002"


def test_comments_and_blank_lines_are_ignored(tmp_path):
    path = _write(tmp_path, "# comment=ignored\n\nALFA=0.5\n")
    config = load_config(path)
    assert config.values == {"ALFA": "0.5"}


def test_value_is_split_at_first_equals(tmp_path):
    path = _write(tmp_path, "KEY=a=b\n")
    assert load_config(path).get_string("KEY") == "a=b"


def test_typed_getters(tmp_path):
    path = _write(tmp_path, "ESTIMACION_INICIAL=10000\nALFA=0.5\n")
    config = load_config(path)
    assert config.get_int("ESTIMACION_INICIAL") == 10000
    assert config.get_float("ALFA") == 0.5


def test_missing_key_raises_key_error():
    with pytest.raises(KeyError):
        Config({"A": "1"}).get_string("B")


def test_bad_integer_raises_value_error():
    with pytest.raises(ValueError):
        Config({"PORT": "abc"}).get_int("PORT")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.config")