import logging

import pytest
from minimalisp.logger.logger import logger, setup_logger, resolve_level
from minimalisp.functional.transforms import reduce


@pytest.fixture
def logger_name(request):
    name = f"minimalisp.test.{request.node.name}"
    yield name
    created = logging.getLogger(name)
    for handler in list(created.handlers):
        if handler.get_name() == f"{name}.stdout":
            created.removeHandler(handler)
    created.setLevel(logging.NOTSET)
    created.propagate = True


def _own_handlers(configured):
    own = f"{configured.name}.stdout"
    return [h for h in configured.handlers if h.get_name() == own]


def test_default_logger():
    assert logger.name == "minimalisp"
    assert _own_handlers(logger)
    assert logger.propagate is False


def test_setup_logger(logger_name):
    configured = setup_logger(logger_name, level="debug", format_string="%(message)s")
    handlers = _own_handlers(configured)
    assert configured.level == logging.DEBUG
    assert len(handlers) == 1
    assert handlers[0].formatter._fmt == "%(message)s"


def test_setup_logger_configures_once(logger_name):
    setup_logger(logger_name, level="INFO")
    again = setup_logger(logger_name, level="ERROR")
    assert len(_own_handlers(again)) == 1
    assert again.level == logging.INFO


def test_setup_logger_ignores_foreign_handlers(logger_name):
    foreign = logging.NullHandler()
    logging.getLogger(logger_name).addHandler(foreign)
    try:
        configured = setup_logger(logger_name, level="INFO")
        assert len(_own_handlers(configured)) == 1
    finally:
        logging.getLogger(logger_name).removeHandler(foreign)


def test_setup_logger_unknown_level(logger_name):
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logger(logger_name, level="verbose")
    assert not _own_handlers(logging.getLogger(logger_name))


@pytest.mark.parametrize(
    "name, expected", [("debug", logging.DEBUG), ("WARNING", logging.WARNING)]
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_contract_violation_is_logged(monkeypatch):
    messages = []
    monkeypatch.setattr(
        logger, "debug", lambda msg, *args, **kwargs: messages.append(msg)
    )
    with pytest.raises(ValueError):
        reduce(lambda a, b: a + b, [])
    assert messages == ["reduce called on an empty sequence"]
