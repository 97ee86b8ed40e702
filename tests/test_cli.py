from number_handler.cli import main


def test_generates_and_processes_directory(tmp_path, capsys):
    root = tmp_path / "run"

    code = main([str(root), "--files-count", "2"])

    out = capsys.readouterr().out
    assert code == 0
    assert f"Directory {root} was successfully processed!" in out
    assert "result.txt" in out
    # 2 generated files + the result
    assert len(list(root.iterdir())) == 3
    assert (root / "result.txt").exists()


def test_prompts_for_directory_when_not_given(tmp_path, monkeypatch, capsys):
    root = tmp_path / "prompted"
    monkeypatch.setattr("builtins.input", lambda: f"  {root}  ")

    code = main(["--files-count", "1", "--result-name", "out.txt"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Enter the path to the directory" in out
    assert (root / "out.txt").exists()


def test_empty_input_is_rejected(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda: "   ")

    code = main([])

    assert code == 2
    assert "The directory path is not correct." in capsys.readouterr().out


def test_closed_stdin_is_rejected(monkeypatch, capsys):
    def raise_eof():
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)

    assert main([]) == 2


def test_failure_is_reported_with_nonzero_exit(tmp_path, capsys):
    missing = tmp_path / "missing"

    code = main([str(missing), "--no-generate"])

    out = capsys.readouterr().out
    assert code == 1
    assert "The process failed:" in out
    assert str(missing) in out


def test_no_generate_processes_existing_files(tmp_path, capsys):
    (tmp_path / "a.txt").write_text("7\n11\n4\n")

    code = main([str(tmp_path), "--no-generate", "--result-name", "res.txt"])

    assert code == 0
    assert (tmp_path / "res.txt").read_text().splitlines() == ["11", "7"]
    assert (tmp_path / "a.txt").exists()


def test_format_error_is_reported(tmp_path, capsys):
    (tmp_path / "a.txt").write_text("7\nabc\n")

    code = main([str(tmp_path), "--no-generate"])

    assert code == 1
    assert "not an integer" in capsys.readouterr().out
    assert not (tmp_path / "result.txt").exists()
