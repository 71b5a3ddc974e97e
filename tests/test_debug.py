import pytest

from brown.debug import AssertionFailure, EngineError, ensure, error, log


def test_log_writes_line(tmp_path):
    path = tmp_path / "LOG.txt"
    log("hello", "main.py", path)
    assert path.read_text() == "[LOG] FILE: main.py: hello\n"


def test_log_appends(tmp_path):
    path = tmp_path / "LOG.txt"
    log("one", "a.py", path)
    log(2, "b.py", path)
    lines = path.read_text().splitlines()
    assert lines == ["[LOG] FILE: a.py: one", "[LOG] FILE: b.py: 2"]


def test_ensure_passing_writes_nothing(tmp_path):
    path = tmp_path / "LOG.txt"
    assert ensure(True, "fine", "f.py", 1, "x", path) is None
    assert not path.exists()


def test_ensure_failing_raises_and_logs(tmp_path):
    path = tmp_path / "LOG.txt"
    with pytest.raises(AssertionFailure, match="broken"):
        ensure(False, "broken", "f.py", 3, "x > 0", path)
    assert path.read_text() == "[ASSERT] FILE: f.py, at line: 3: broken (x > 0)\n"


def test_error_raises_and_logs(tmp_path):
    path = tmp_path / "LOG.txt"
    with pytest.raises(EngineError, match="bad"):
        error("bad", "g.py", 9, path)
    assert path.read_text() == "[ERROR] FILE: g.py, at line: 9: bad\n"


def test_assertion_failure_is_engine_error(tmp_path):
    with pytest.raises(EngineError):
        ensure(False, "m", path=tmp_path / "log")