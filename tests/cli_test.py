import pytest

from binheap import cli


def test_sort(capsys):
    cli.main(["sort", "5", "3", "8", "1", "9", "2"])
    assert capsys.readouterr().out.strip() == "1 2 3 5 8 9"


def test_sort_mixed_numbers(capsys):
    cli.main(["sort", "2.5", "-1", "2"])
    assert capsys.readouterr().out.strip() == "-1 2 2.5"


def test_levels(capsys):
    cli.main(["levels", "5", "3", "8", "1", "9", "2"])
    assert capsys.readouterr().out.splitlines() == ["1", "3 2", "5 9 8"]


def test_levels_empty(capsys):
    cli.main(["levels"])
    assert capsys.readouterr().out.strip() == "Heap is empty."


def test_delete_found_and_missing(capsys):
    cli.main(["delete", "--value", "8", "5", "3", "8", "1"])
    assert capsys.readouterr().out.splitlines() == ["deleted 8", "1 3 5"]

    cli.main(["delete", "--value", "4", "5", "3"])
    assert capsys.readouterr().out.splitlines() == ["4 not found", "3 5"]


def test_bench(tmp_path, capsys):
    path = tmp_path / "b.csv"
    cli.main(["bench", "--path", str(path), "--base", "2", "--steps", "1", "--iterations", "2"])
    assert path.exists()
    assert "4 rows saved" in capsys.readouterr().out


def test_bad_number_exits():
    with pytest.raises(SystemExit) as exc:
        cli.main(["sort", "abc"])
    assert exc.value.code == 2
