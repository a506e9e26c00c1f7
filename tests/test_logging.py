import logging

from logging_setup import APP_LOGGER, _ThirdPartyFilter, get_logger


def record(name, level=logging.INFO):
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_get_logger_uses_app_prefix():
    assert get_logger("todos").name == f"{APP_LOGGER}.todos"


def test_info_from_any_app_module_passes():
    f = _ThirdPartyFilter()
    assert f.filter(record(get_logger("todos").name))
    # a module the filter has never heard of
    assert f.filter(record(get_logger("exporter").name))


def test_third_party_info_is_dropped():
    f = _ThirdPartyFilter()
    assert not f.filter(record("uvicorn.error"))
    assert not f.filter(record("todo_listing"))


def test_third_party_warnings_pass():
    assert _ThirdPartyFilter().filter(record("uvicorn.error", logging.WARNING))
