import json

from hyperreal.instrumentor import (
    InstrumentationTimer,
    Instrumentor,
    ProfileResult,
    get_instrumentor,
    profile_function,
    profile_scope,
)


def read_events(path):
    return json.loads(path.read_text(encoding="utf-8"))["traceEvents"]


def test_empty_session_is_valid_json(tmp_path):
    path = tmp_path / "trace.json"
    inst = Instrumentor()
    inst.begin_session("Startup", str(path))
    inst.end_session()
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"otherData": {}, "traceEvents": []}


def test_written_profile_fields(tmp_path):
    path = tmp_path / "trace.json"
    inst = Instrumentor()
    inst.begin_session("Runtime", str(path))
    inst.write_profile(ProfileResult("draw", 100, 250, 7))
    inst.write_profile(ProfileResult("update", 300, 310, 7))
    inst.end_session()
    events = read_events(path)
    assert [e["name"] for e in events] == ["draw", "update"]
    first = events[0]
    assert first["dur"] == 250 - 100
    assert first["ts"] == 100
    assert first["tid"] == 7
    assert first["cat"] == "function"
    assert first["ph"] == "X"
    assert first["pid"] == 0


def test_quotes_in_name_are_replaced(tmp_path):
    path = tmp_path / "trace.json"
    inst = Instrumentor()
    inst.begin_session("s", str(path))
    inst.write_profile(ProfileResult('say "hi"', 0, 1, 1))
    inst.end_session()
    assert read_events(path)[0]["name"] == "say 'hi'"


def test_session_name_tracking(tmp_path):
    inst = Instrumentor()
    inst.begin_session("Shutdown", str(tmp_path / "t.json"))
    assert inst.session_name == "Shutdown"
    inst.end_session()
    assert inst.session_name is None


def test_profile_outside_session_is_dropped(tmp_path):
    inst = Instrumentor()
    inst.write_profile(ProfileResult("lost", 0, 1, 1))
    path = tmp_path / "t.json"
    inst.begin_session("s", str(path))
    inst.end_session()
    assert read_events(path) == []


def test_timer_context_manager_records_once(tmp_path):
    path = tmp_path / "t.json"
    inst = Instrumentor()
    inst.begin_session("s", str(path))
    with InstrumentationTimer("scope", inst) as timer:
        pass
    inst.end_session()
    events = read_events(path)
    assert timer.stopped is True
    assert len(events) == 1
    assert events[0]["name"] == "scope"
    assert events[0]["dur"] >= 0


def test_stop_returns_result():
    timer = InstrumentationTimer("x", Instrumentor())
    result = timer.stop()
    assert result.name == "x"
    assert result.end >= result.start


def test_global_helpers(tmp_path):
    path = tmp_path / "global.json"

    @profile_function
    def add(a, b):
        return a + b

    inst = get_instrumentor()
    inst.begin_session("g", str(path))
    try:
        assert add(2, 3) == 5
        with profile_scope("block"):
            pass
    finally:
        inst.end_session()
    names = [e["name"] for e in read_events(path)]
    assert names[1] == "block"
    assert names[0].endswith("add")
    assert add.__name__ == "add"