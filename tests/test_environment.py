"""
Test de carga del entorno
=========================
"""

import json

import pytest

from propcomb.domain.terms import Bool, Str
from propcomb.services.environment import environment_from_mapping, load_environment


def test_environment_from_mapping():
    env, issues = environment_from_mapping({"x": True, "name": "熊猫", "off": False})
    assert env == {"x": Bool(value=True), "name": Str(value="熊猫"), "off": Bool(value=False)}
    assert issues == []


def test_unsupported_values_are_skipped():
    env, issues = environment_from_mapping({"x": True, "n": 3, "l": [1], "none": None})
    assert env == {"x": Bool(value=True)}
    assert sorted(issue.where for issue in issues) == ["l", "n", "none"]
    assert all(issue.severity == "warning" for issue in issues)
    assert "Invalid value type for key 'n'!" in [issue.msg for issue in issues]


def test_load_environment(tmp_path):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"x": True, "y": "熊猫", "z": 1.5}), encoding="utf-8")

    env, issues = load_environment(path)
    assert env == {"x": Bool(value=True), "y": Str(value="熊猫")}
    assert len(issues) == 1


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_environment(tmp_path / "missing.json")


def test_malformed_json_is_a_warning(tmp_path):
    path = tmp_path / "env.json"
    path.write_text("{not json", encoding="utf-8")

    env, issues = load_environment(path)
    assert env == {}
    assert len(issues) == 1
    assert "Malformed JSON" in issues[0].msg


def test_badly_encoded_file_is_a_warning(tmp_path):
    path = tmp_path / "env.json"
    path.write_bytes(b'{"x": "\xff\xfe"}')

    env, issues = load_environment(path)
    assert env == {}
    assert len(issues) == 1
    assert "UTF-8" in issues[0].msg


def test_non_object_document_is_a_warning(tmp_path):
    path = tmp_path / "env.json"
    path.write_text("[true, false]", encoding="utf-8")

    env, issues = load_environment(path)
    assert env == {}
    assert len(issues) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
