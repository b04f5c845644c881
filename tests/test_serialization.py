"""Tests for the json module adapters."""

import json

import pytest

from semver_value import (
    Version,
    VersionEncoder,
    SegmentCountError,
    dumps,
    loads,
    decode_versions,
)


def test_encoder_with_json_dumps():
    doc = {"name": "agent", "version": Version("v", 1, 2, 3)}
    assert json.dumps(doc, cls=VersionEncoder) == '{"name": "agent", "version": "v1.2.3"}'


def test_encoder_rejects_unknown_types():
    with pytest.raises(TypeError):
        dumps({"value": object()})


def test_dumps_passes_kwargs():
    out = dumps({"b": Version("", 1, 0, 0), "a": 1}, sort_keys=True)
    assert out == '{"a": 1, "b": "1.0.0"}'


def test_dumps_escapes_prefix():
    out = dumps([Version('q"', 1, 0, 0)])
    assert json.loads(out) == ['q"1.0.0']


def test_loads_without_keys():
    assert loads('{"version": "v1.2.3"}') == {"version": "v1.2.3"}


def test_loads_with_keys():
    doc = loads('{"version": "v1.2.3", "name": "1.2.3"}', keys=["version"])
    assert doc == {"version": Version("v", 1, 2, 3), "name": "1.2.3"}


def test_loads_nested():
    data = b'{"deps": [{"name": "a", "version": "1.0.0"}, {"name": "b", "version": "r2.1.0"}]}'
    doc = loads(data, keys={"version"})
    assert [d["version"] for d in doc["deps"]] == [
        Version("", 1, 0, 0),
        Version("r", 2, 1, 0),
    ]


def test_loads_single_key_string():
    doc = loads('{"version": "v1.2.3", "v": "x"}', keys="version")
    assert doc == {"version": Version("v", 1, 2, 3), "v": "x"}


def test_decode_versions_single_key_string():
    doc = decode_versions({"release": {"version": "2.0.1"}}, "version")
    assert doc["release"]["version"] == Version("", 2, 0, 1)


def test_loads_ignores_non_string_values():
    doc = loads('{"version": 3}', keys=["version"])
    assert doc == {"version": 3}


def test_loads_propagates_parse_errors():
    with pytest.raises(SegmentCountError):
        loads('{"version": "1.2"}', keys=["version"])


def test_decode_versions_returns_same_object():
    doc = {"version": "1.2.3"}
    assert decode_versions(doc, ["version"]) is doc
    assert doc["version"] == Version("", 1, 2, 3)


def test_round_trip():
    doc = {"from": Version("v", 8, 10, 0), "to": Version("v", 9, 2, 0)}
    assert loads(dumps(doc), keys=["from", "to"]) == doc
