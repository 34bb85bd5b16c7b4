from pathlib import Path

from matdot.cli import main

TESTDATA = Path(__file__).parent / "testdata"


def run(*args):
    return main([str(a) for a in args])


def test_prints_operands_and_result(capsys):
    code = run("-a", TESTDATA / "2x2.csv", "-b", TESTDATA / "2x4.csv")
    assert code == 0
    out = capsys.readouterr().out
    assert "Matrix a looks like:\n[  1  2 ]\n[  3  4 ]\n" in out
    assert "Result looks like:\n[ 11 14 17 20 ]\n[ 23 30 37 44 ]\n" in out


def test_out_file(tmp_path):
    out = tmp_path / "result.csv"
    code = run("-a", TESTDATA / "2x2.csv", "-b", TESTDATA / "2x4.csv", "-o", out)
    assert code == 0
    assert out.read_text() == (TESTDATA / "2x4_out.csv").read_text()


def test_unwritable_out_file_prints_result(tmp_path, capsys, caplog):
    out = tmp_path / "missing-dir" / "result.csv"
    code = run("-a", TESTDATA / "1x1_1.csv", "-b", TESTDATA / "1x1_2.csv", "-o", out)
    assert code == 1
    assert "The result Matrix looks like:\n[ 15 ]\n" in capsys.readouterr().out
    assert "couldn't write the file" in caplog.text


def test_4x4_dot_2x2(caplog):
    code = run("-a", TESTDATA / "4x4_1.csv", "-b", TESTDATA / "2x2.csv")
    assert code == 1
    assert "not defined" in caplog.text
    assert "https://en.wikipedia.org/wiki/Dot_product" in caplog.text


def test_string_in_matrix(caplog):
    code = run("-a", TESTDATA / "2x2.csv", "-b", TESTDATA / "bad1.csv")
    assert code == 1
    assert "doesn't appear to be an int" in caplog.text
    assert "Check the format of your Matrix" in caplog.text


def test_bad_line_lengths(caplog):
    code = run("-a", TESTDATA / "bad2.csv", "-b", TESTDATA / "2x2.csv")
    assert code == 1
    assert "doesn't appear to be valid" in caplog.text


def test_missing_file(caplog):
    code = run("-a", TESTDATA / "nope.csv", "-b", TESTDATA / "2x2.csv")
    assert code == 1
    assert "does not seem to exist" in caplog.text


def test_missing_flags(capsys):
    assert run("-a", TESTDATA / "2x2.csv") == 1
    assert "I need you to specify -a and -b" in capsys.readouterr().out
