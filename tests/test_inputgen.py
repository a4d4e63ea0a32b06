import io
import sys

import pytest

from irsimtools.inputgen import (
    array_names,
    instance_array_names,
    instance_path,
    main,
    write_inputs,
)


def test_array_names_example():
    assert array_names("a", 0, 2) == ["a0", "a1", "a2"]


@pytest.mark.parametrize("begin,end", [(0, 0), (3, 7), (10, 15)])
def test_array_names_covers_range(begin, end):
    names = array_names("bit", begin, end)
    assert len(names) == end - begin + 1
    assert names[0] == f"bit{begin}"
    assert names[-1] == f"bit{end}"


@pytest.mark.parametrize("begin,end", [(3, 1), (-1, 2), (0, -1)])
def test_array_names_invalid(begin, end):
    with pytest.raises(ValueError):
        array_names("x", begin, end)


def test_instance_array_names_example():
    assert instance_array_names("net", "cell", 3, 5, 5) == ["{cell_3[5]/net}"]


def test_instance_array_names_shape():
    names = instance_array_names("out", "dec", 1, 2, 6)
    assert len(names) == 5
    assert all(n.startswith("{dec_1[") and n.endswith("]/out}") for n in names)


@pytest.mark.parametrize("begin,end", [(4, 2), (-2, 0), (0, -3)])
def test_instance_array_names_invalid(begin, end):
    with pytest.raises(ValueError):
        instance_array_names("n", "c", 0, begin, end)


def test_instance_path_example():
    assert instance_path("net", [("a", 1), ("b", 2)]) == "{a_1/b_2/net}"


def test_instance_path_no_levels():
    assert instance_path("vdd", []) == "{vdd}"


def test_write_inputs_round_trip(tmp_path):
    names = ["first", "second", "third"]
    path = write_inputs(names, tmp_path)
    assert path == tmp_path / "first.in"
    content = path.read_text()
    assert content.split() == names
    assert content.endswith(" ")


def test_write_inputs_empty(tmp_path):
    with pytest.raises(ValueError):
        write_inputs([], tmp_path)


def _run(monkeypatch, tmp_path, text):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main([])


def test_main_single_item(monkeypatch, tmp_path):
    assert _run(monkeypatch, tmp_path, "yes\nfoo\nno\nno\nno\nyes\n") == 0
    assert (tmp_path / "foo.in").read_text().split() == ["foo"]


def test_main_array_item(monkeypatch, tmp_path):
    _run(monkeypatch, tmp_path, "yes\nbit\nyes\nno\n0\n2\nno\nyes\n")
    content = (tmp_path / "bit0.in").read_text()
    assert content.split() == array_names("bit", 0, 2)


def test_main_instance_item(monkeypatch, tmp_path):
    text = "yes\nfirst\nno\nno\nyes\nnet\nno\nyes\ncellA\n1\nyes\ncellB\n2\nno\nno\nyes\n"
    _run(monkeypatch, tmp_path, text)
    content = (tmp_path / "first.in").read_text().split()
    assert content == ["first", instance_path("net", [("cellA", 1), ("cellB", 2)])]


def test_main_instance_array_item(monkeypatch, tmp_path):
    text = "yes\nfirst\nno\nno\nyes\nout\nyes\nyes\ndec\n4\n1\n3\nno\nyes\n"
    _run(monkeypatch, tmp_path, text)
    content = (tmp_path / "first.in").read_text().split()
    assert content == ["first"] + instance_array_names("out", "dec", 4, 1, 3)


def test_main_bad_number(monkeypatch, tmp_path, capsys):
    _run(monkeypatch, tmp_path, "yes\nx\nyes\nno\nabc\nno\nyes\n")
    out = capsys.readouterr().out
    assert "did not convert to a number properly" in out
    assert list(tmp_path.iterdir()) == []


def test_main_declines_write(monkeypatch, tmp_path, capsys):
    _run(monkeypatch, tmp_path, "yes\nfoo\nno\nno\nno\nno\n")
    assert "Quitting program" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []