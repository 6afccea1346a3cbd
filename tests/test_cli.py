import pytest

from pipex.cli import Invocation, main, parse_arguments


def test_parse_arguments():
    result = parse_arguments(["in", "cmd1", "cmd2", "out"])
    assert result == Invocation("in", ("cmd1", "cmd2"), "out")


def test_parse_arguments_without_commands():
    result = parse_arguments(["in", "out"])
    assert result.commands == ()
    assert result.infile == "in"
    assert result.outfile == "out"


@pytest.mark.parametrize("argv", [[], ["only"]])
def test_parse_arguments_too_few(argv):
    with pytest.raises(ValueError):
        parse_arguments(argv)


def test_main_creates_outfile(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", str(outfile)]) == 0
    assert outfile.exists()
    assert outfile.read_bytes() == b""


def test_main_truncates_existing_outfile(tmp_path):
    outfile = tmp_path / "out.txt"
    outfile.write_text("old contents")
    assert main([str(tmp_path / "missing"), "cat", str(outfile)]) == 0
    assert outfile.read_bytes() == b""


def test_main_leaves_infile_alone(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("keep me")
    main([str(infile), "cat", str(tmp_path / "out.txt")])
    assert infile.read_text() == "keep me"


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_unwritable_outfile(tmp_path):
    target = tmp_path / "no_such_dir" / "out.txt"
    assert main([str(tmp_path / "in"), "cat", str(target)]) == 1
    assert not target.exists()