from gedcom_lossless.diagnostics import Diagnostic, DiagnosticLevel, DiagnosticLog


def test_empty_log():
    log = DiagnosticLog()

    assert len(log) == 0
    assert not log.has_warning()
    assert not log.has_error()
    assert log.to_dict() == {"info": 0, "warning": 0, "error": 0}
    assert log.to_list() == []


def test_log_records_in_order_and_counts_levels():
    log = DiagnosticLog()
    log.add_info("started")
    log.add_warning("bad line", lineno=3, raw="???")
    log.add_error("worse")

    assert [d.level for d in log] == [
        DiagnosticLevel.INFO,
        DiagnosticLevel.WARNING,
        DiagnosticLevel.ERROR,
    ]
    assert log.has_warning()
    assert log.has_error()
    assert log.stats().total == 3
    assert log.to_dict() == {"info": 1, "warning": 1, "error": 1}
    assert log.to_list()[1] == {
        "level": "warning",
        "message": "bad line",
        "lineno": 3,
        "raw": "???",
    }


def test_from_iterable():
    items = [Diagnostic(DiagnosticLevel.WARNING, "a", 1), Diagnostic(DiagnosticLevel.WARNING, "b", 2)]
    log = DiagnosticLog.from_iterable(items)

    assert len(log) == 2
    assert log.stats().n_warning == 2
