from clubsim.cli import main
from clubsim.club import run

EXAMPLE = [
    "3",
    "09:00 19:00",
    "10",
    "09:41 1 client1",
    "09:54 2 client1 1",
    "12:33 4 client1",
]


def test_usage_without_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "Usage" in captured.err
    assert captured.out == ""


def test_usage_with_too_many_arguments(capsys):
    assert main(["a", "b"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_prints_simulation(tmp_path, capsys):
    path = tmp_path / "club.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == run(EXAMPLE)
    assert out.splitlines()[0] == "09:00"


def test_missing_final_newline(tmp_path, capsys):
    path = tmp_path / "club.txt"
    path.write_text("\n".join(EXAMPLE))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == run(EXAMPLE)


def test_bad_line_is_printed(tmp_path, capsys):
    path = tmp_path / "club.txt"
    path.write_text("3\n09:00 19:00\n10\n09:41 7 client1\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "09:41 7 client1\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    captured = capsys.readouterr()
    assert "absent.txt" in captured.err
    assert captured.out == ""