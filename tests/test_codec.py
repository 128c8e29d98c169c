"""
Obscura: Codec facade and CLI tests
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from obscura import Codec, Failure, is_failure
from obscura.cli import main
from obscura.config import get_settings


def test_codec_round_trips():
    codec = Codec("facade-key", hex_output=True)
    assert codec.decode_id(codec.encode_id(99)) == 99
    assert codec.decrypt(codec.encrypt([1, 2, 3])) == [1, 2, 3]
    assert codec.decrypt_string(codec.encrypt_string(b"raw")) == b"raw"
    assert codec.base_decode(codec.base_encode(123456)) == 123456
    assert codec.text_to_binary(codec.binary_to_text(b"\x00\x01")) == b"\x00\x01"


def test_codec_raw_output():
    codec = Codec("facade-key", hex_output=False)
    blob = codec.encrypt("hello")
    assert isinstance(blob, bytes)
    assert codec.decrypt(blob) == "hello"


def test_codec_without_key_fails():
    codec = Codec("", hex_output=True)
    assert is_failure(codec.encrypt("hello"))


def test_codec_repr_hides_key():
    assert "facade-key" not in repr(Codec("facade-key"))


def test_failure_is_falsy():
    failure = Failure("magic marker mismatch")
    assert not failure
    assert failure.reason == "magic marker mismatch"


def test_cli_id_round_trip(capsys):
    assert main(["encode-id", "123456"]) == 0
    token = capsys.readouterr().out.strip()
    assert len(token) == 12

    assert main(["decode-id", token]) == 0
    assert capsys.readouterr().out.strip() == "123456"


def test_cli_rejects_bad_id(capsys):
    assert main(["encode-id", "-5"]) == 1
    assert main(["decode-id", "invalid_string"]) == 1


def test_cli_encrypt_round_trip(capsys):
    assert main(["encrypt", '{"a": [1, true, null]}', "--json", "--key", "cli-key"]) == 0
    blob = capsys.readouterr().out.strip()

    assert main(["decrypt", blob, "--key", "cli-key"]) == 0
    assert json.loads(capsys.readouterr().out) == {"a": [1, True, None]}

    assert main(["decrypt", blob, "--key", "wrong-key"]) == 1


def test_cli_requires_key():
    assert main(["encrypt", "hello", "--key", ""]) == 2


def test_cli_rejects_invalid_json():
    assert main(["encrypt", "{oops", "--json", "--key", "cli-key"]) == 2


def test_cli_base_conversion(capsys):
    assert main(["base-encode", "123456"]) == 0
    assert capsys.readouterr().out.strip() == "2n9c"

    assert main(["base-decode", "2n9c"]) == 0
    assert capsys.readouterr().out.strip() == "123456"

    assert main(["base-encode", "14776336", "--radix", "62"]) == 0
    assert capsys.readouterr().out.strip() == "10000"

    assert main(["base-decode", "C", "--radix", "36"]) == 1


def test_explicit_settings_skip_environment(monkeypatch):
    monkeypatch.setenv("OBSCURA_LOG_LEVEL", "LOUD")
    get_settings.cache_clear()
    try:
        codec = Codec("facade-key", hex_output=True)
        assert codec.decrypt(codec.encrypt("hello")) == "hello"
    finally:
        get_settings.cache_clear()
