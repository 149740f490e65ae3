"""Tests for fsroutes.observability — route events and the event log."""

import threading

from fsroutes.observability import (
    EventLog,
    RouteCollector,
    RouteCollision,
    RouteIndexChanged,
    RoutesDiscovered,
    RoutesResolved,
    now_ns,
)


def _changed(path: str, kind: str = "added") -> RouteIndexChanged:
    return RouteIndexChanged(path=path, kind=kind, route_key="k", timestamp_ns=now_ns())  # type: ignore[arg-type]


class TestEventLog:
    """Bounded, queryable store."""

    def test_append_and_len(self) -> None:
        log = EventLog()
        assert len(log) == 0
        log.append(_changed("/a.tsx"))
        assert len(log) == 1

    def test_max_events_enforced(self) -> None:
        log = EventLog(max_events=5)
        for i in range(10):
            log.append(_changed(f"/{i}.tsx"))
        assert len(log) == 5
        assert log.recent(1)[0].path == "/9.tsx"

    def test_query_by_type(self) -> None:
        log = EventLog()
        log.append(_changed("/a.tsx"))
        log.append(RoutesResolved(
            schema_variant=5, route_count=1, import_count=1,
            duration_ms=0.1, timestamp_ns=now_ns(),
        ))
        results = log.query(event_type=RoutesResolved)
        assert len(results) == 1
        assert isinstance(results[0], RoutesResolved)

    def test_query_by_path(self) -> None:
        log = EventLog()
        log.append(_changed("/pages/blog/a.tsx"))
        log.append(_changed("/pages/docs/b.tsx"))
        log.append(RoutesDiscovered(
            routes_dir="/pages", file_count=2, duration_ms=1.0, timestamp_ns=now_ns(),
        ))
        assert [e.path for e in log.query(path="blog")] == ["/pages/blog/a.tsx"]
        assert len(log.query(path="/pages")) == 3

    def test_query_newest_first_with_limit(self) -> None:
        log = EventLog()
        for i in range(5):
            log.append(_changed(f"/{i}.tsx"))
        assert [e.path for e in log.query(limit=2)] == ["/4.tsx", "/3.tsx"]

    def test_clear(self) -> None:
        log = EventLog()
        for i in range(3):
            log.append(_changed(f"/{i}.tsx"))
        assert log.clear() == 3
        assert len(log) == 0

    def test_stats(self) -> None:
        log = EventLog()
        log.append(_changed("/a.tsx"))
        log.append(_changed("/b.tsx", "removed"))
        log.append(RouteCollision(name="a", path="/a.tsx", replaced="/A.tsx", timestamp_ns=now_ns()))
        stats = log.stats()
        assert stats["total"] == 3
        assert stats["by_type"] == {"RouteIndexChanged": 2, "RouteCollision": 1}

    def test_thread_safety(self) -> None:
        log = EventLog(max_events=10_000)

        def _writer(n: int) -> None:
            for i in range(500):
                log.append(_changed(f"/{n}/{i}.tsx"))

        threads = [threading.Thread(target=_writer, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(log) == 2000


class TestRouteCollector:
    """Typed record helpers."""

    def test_default_log(self) -> None:
        assert isinstance(RouteCollector().log, EventLog)

    def test_record_helpers(self) -> None:
        collector = RouteCollector()
        collector.record_discovery("/pages", file_count=3, duration_ms=1.5)
        collector.record_index_change("/pages/a.tsx", "added", "a")
        collector.record_resolution(6, route_count=3, import_count=3)
        collector.record_collision("about", "/pages/about.tsx", "/pages/About.tsx")
        types = [type(e) for e in collector.log.recent()]
        assert types == [RoutesDiscovered, RouteIndexChanged, RoutesResolved, RouteCollision]

    def test_events_frozen(self) -> None:
        event = _changed("/a.tsx")
        try:
            event.kind = "removed"  # type: ignore[misc]
        except AttributeError:
            pass
        else:
            raise AssertionError("RouteIndexChanged should be frozen")
