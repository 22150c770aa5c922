"""
Test de la línea de comandos
============================
"""

import json

import pytest

from propcomb.cli import calc_main, prop_main


def test_prop_without_environment(capsys):
    assert prop_main(["NOT NOT NOT x"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "parsed expression = (NOT x)",
        "simplified result = (NOT x)",
    ]


def test_prop_with_environment(tmp_path, capsys):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"x": True, "bad": 1}), encoding="utf-8")

    assert prop_main([str(path), "NOT x OR y"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "parsed expression = ((NOT x) OR y)",
        "simplified result = y",
    ]


def test_prop_remaining_input(capsys):
    assert prop_main(["a AND b )"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "There's some remaining input: )"


def test_prop_parse_failure(capsys):
    assert prop_main(["AND"]) == 1
    assert capsys.readouterr().out.strip() == "Can't parse the input!"


def test_prop_missing_environment_file(tmp_path):
    assert prop_main([str(tmp_path / "missing.json"), "x"]) == 1


def test_prop_badly_encoded_environment(tmp_path, capsys):
    path = tmp_path / "env.json"
    path.write_bytes(b'{"x": "\xff\xfe"}')

    assert prop_main([str(path), "x"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["parsed expression = x", "simplified result = x"]


def test_prop_long_chain(tmp_path, capsys):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"x": False}), encoding="utf-8")

    assert prop_main([str(path), " OR ".join(["x"] * 2000)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("parsed expression = (x OR (x OR ")
    assert out[1] == "simplified result = FALSE"


def test_prop_too_deeply_nested(capsys):
    formula = "(" * 5000 + "x" + ")" * 5000
    assert prop_main([formula]) == 1
    assert capsys.readouterr().out.strip() == "Can't parse the input!"


def test_prop_usage_on_wrong_arity():
    with pytest.raises(SystemExit):
        prop_main([])


def test_calc(capsys):
    assert calc_main(["1 + 2 * 3 x"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["result = 7", "There's some remaining input: x"]


def test_calc_failure(capsys):
    assert calc_main(["x"]) == 1
    assert capsys.readouterr().out.strip() == "Couldn't read the input!"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
