import logging

from gedcom_lossless.logging import get_logger, list_active_loggers, set_level


def test_get_logger_namespaces_module_loggers():
    log = get_logger("tests.sample")

    assert log.name == "gedcom_lossless.tests.sample"
    assert "gedcom_lossless.tests.sample" in list_active_loggers()


def test_get_logger_keeps_qualified_names():
    assert get_logger("gedcom_lossless.loader").name == "gedcom_lossless.loader"
    assert get_logger().name == "gedcom_lossless"


def test_set_level_applies_to_cached_loggers():
    log = get_logger("tests.level")

    set_level(logging.INFO)
    try:
        assert log.level == logging.INFO
        assert logging.getLogger("gedcom_lossless").level == logging.INFO
    finally:
        set_level(logging.WARNING)
