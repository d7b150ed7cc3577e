import io
import os

import pytest

from pipeweld.files import Redirections, open_files, open_here_doc, open_normal


def _read_all(fd):
    chunks = []
    while True:
        chunk = os.read(fd, 4096)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def test_open_normal_reads_infile_and_truncates_outfile(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("payload\n")
    outfile.write_text("old content")
    redirections = open_normal([str(infile), "cat", "wc", str(outfile)])
    try:
        assert redirections.nb_cmd == 2
        assert redirections.here_doc is False
        assert redirections.error is False
        assert _read_all(redirections.infile) == b"payload\n"
        assert outfile.read_text() == ""
        os.write(redirections.outfile, b"new")
    finally:
        redirections.close()
    assert outfile.read_text() == "new"


def test_open_normal_creates_outfile_with_mode(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("x")
    outfile = tmp_path / "created.txt"
    old_umask = os.umask(0)
    try:
        with open_normal([str(infile), "cat", "cat", str(outfile)]):
            pass
    finally:
        os.umask(old_umask)
    assert outfile.stat().st_mode & 0o777 == 0o644


def test_open_normal_missing_infile_uses_null_device(tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    with open_normal([str(tmp_path / "absent"), "cat", "cat", str(outfile)]) as r:
        assert _read_all(r.infile) == b""
        assert r.error is False
    assert "open infile" in capsys.readouterr().err


def test_open_normal_unwritable_outfile_sets_error(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("x")
    target = tmp_path / "missing-dir" / "out.txt"
    with open_normal([str(infile), "cat", "cat", str(target)]) as r:
        assert r.error is True
        assert os.write(r.outfile, b"discarded") == len(b"discarded")
    assert not target.exists()
    assert "open outfile" in capsys.readouterr().err


def test_open_here_doc_feeds_text_and_appends(tmp_path):
    outfile = tmp_path / "out.txt"
    outfile.write_text("kept\n")
    stdin = io.StringIO("a\nb\nEND\nleft\n")
    redirections = open_here_doc(["here_doc", "END", "cat", str(outfile)], stdin)
    try:
        assert redirections.here_doc is True
        assert redirections.nb_cmd == 1
        assert _read_all(redirections.infile) == b"a\nb\n"
        os.write(redirections.outfile, b"more\n")
    finally:
        redirections.close()
    assert outfile.read_text() == "kept\nmore\n"
    assert stdin.read() == "left\n"


def test_open_files_dispatches_on_here_doc_prefix(tmp_path):
    outfile = tmp_path / "out.txt"
    stdin = io.StringIO("line\nSTOP\n")
    with open_files(["here_docs", "STOP", "cat", "cat", str(outfile)], stdin) as r:
        assert r.here_doc is True
        assert r.nb_cmd == 2
        assert _read_all(r.infile) == b"line\n"


def test_open_files_normal_mode(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("data")
    with open_files([str(infile), "cat", "cat", str(tmp_path / "o")]) as r:
        assert r.here_doc is False
        assert _read_all(r.infile) == b"data"


def test_close_releases_descriptors_and_is_idempotent(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("x")
    redirections = open_normal([str(infile), "cat", "cat", str(tmp_path / "o")])
    redirections.close()
    redirections.close()
    with pytest.raises(OSError):
        os.fstat(redirections.infile)
    with pytest.raises(OSError):
        os.fstat(redirections.outfile)


def test_redirections_context_manager_closes(tmp_path):
    read_fd, write_fd = os.pipe()
    with Redirections(infile=read_fd, outfile=write_fd, nb_cmd=1) as r:
        assert r.nb_cmd == 1
    with pytest.raises(OSError):
        os.fstat(read_fd)


def test_too_few_arguments_rejected():
    with pytest.raises(ValueError):
        open_normal(["only-one"])
    with pytest.raises(ValueError):
        open_here_doc(["here_doc", "END"], io.StringIO(""))