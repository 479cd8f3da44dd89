import io

from libraryhub.cli import main
from libraryhub.resources import create_resource


def _run(monkeypatch, tmp_path, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main(["--data-dir", str(tmp_path)])


def test_add_user_and_save(monkeypatch, tmp_path, capsys):
    status = _run(monkeypatch, tmp_path, "1\nU1\nAlice\n6\n")
    assert status == 0
    assert (tmp_path / "users.csv").read_text(encoding="utf-8") == "U1,Alice\n"
    out = capsys.readouterr().out
    assert "User added." in out
    assert "Data saved. Exiting..." in out


def test_add_resource_and_save(monkeypatch, tmp_path):
    _run(monkeypatch, tmp_path, "2\nbook\nB1\nDune\nHerbert\n1965\n6\n")
    expected = create_resource("Book", "B1", "Dune", "Herbert", 1965).to_csv()
    assert (tmp_path / "resources.csv").read_text(encoding="utf-8") == expected + "\n"


def test_invalid_resource_type(monkeypatch, tmp_path, capsys):
    _run(monkeypatch, tmp_path, "2\nmap\nM1\nAtlas\nMercator\n1569\n6\n")
    assert "Invalid type." in capsys.readouterr().out
    assert (tmp_path / "resources.csv").read_text(encoding="utf-8") == ""


def test_invalid_choice(monkeypatch, tmp_path, capsys):
    _run(monkeypatch, tmp_path, "9\n6\n")
    assert "Invalid choice." in capsys.readouterr().out


def test_list_resources_loaded_from_disk(monkeypatch, tmp_path, capsys):
    book = create_resource("Book", "B1", "Dune", "Herbert", 1965)
    (tmp_path / "resources.csv").write_text(book.to_csv() + "\n", encoding="utf-8")
    _run(monkeypatch, tmp_path, "5\n6\n")
    out = capsys.readouterr().out
    assert "--- Resource List ---" in out
    assert book.describe() + "\n" in out


def test_borrow_through_menu(monkeypatch, tmp_path, capsys):
    _run(
        monkeypatch,
        tmp_path,
        "1\nU1\nAlice\n2\nThesis\nT1\nGraphs\nEuler\n1736\n3\nU1\nT1\n6\n",
    )
    out = capsys.readouterr().out
    assert "You have borrowed: Graphs" in out
    assert "Borrow request processed." in out
    loans = (tmp_path / "loans.csv").read_text(encoding="utf-8").splitlines()
    assert [line.split(",")[:2] for line in loans] == [["T1", "U1"]]


def test_end_of_input_exits_without_saving(monkeypatch, tmp_path):
    status = _run(monkeypatch, tmp_path, "1\nU1\nAlice\n")
    assert status == 0
    assert not (tmp_path / "users.csv").exists()