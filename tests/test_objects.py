from minigit.objects import Blob, Commit, parse_commit


def test_blob_save_creates_store(tmp_path):
    blob = Blob("a.txt", "abc123")
    path = blob.save(b"data\n", tmp_path)
    assert path == tmp_path / ".minigit" / "objects" / "abc123"
    assert path.read_bytes() == b"data\n"


def test_blob_save_accepts_text(tmp_path):
    Blob("a.txt", "h1").save("text", tmp_path)
    assert (tmp_path / ".minigit" / "objects" / "h1").read_text(encoding="utf-8") == "text"


def test_blob_save_overwrites(tmp_path):
    blob = Blob("a.txt", "h2")
    blob.save(b"first", tmp_path)
    blob.save(b"second", tmp_path)
    assert (tmp_path / ".minigit" / "objects" / "h2").read_bytes() == b"second"


def test_render_format():
    commit = Commit("h", "msg", "Mon Jan  1 00:00:00 2024", "null", ["b1", "b2"])
    assert commit.render() == (
        "commit: h\n"
        "timestamp: Mon Jan  1 00:00:00 2024\n"
        "message: msg\n"
        "parent: null\n"
        "blob: b1\n"
        "blob: b2\n"
    )


def test_render_parse_round_trip():
    commit = Commit("abc", "fix: thing", "Tue Feb  2 10:11:12 2021", "def", ["x", "y", "z"])
    assert parse_commit(commit.render()) == commit


def test_parse_without_blobs():
    parsed = parse_commit("commit: c\nparent: p\n")
    assert parsed.hash == "c"
    assert parsed.parent_hash == "p"
    assert parsed.blob_hashes == []
    assert parsed.message == ""


def test_parse_ignores_unknown_lines():
    parsed = parse_commit("junk\nmessage: hi\nother: x\n")
    assert parsed.message == "hi"
    assert parsed.hash == ""