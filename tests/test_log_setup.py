import logging

import pytest

from gridpath.config import LoggingConfig
from gridpath.utils.log_setup import configure_logging


@pytest.fixture
def restore_levels():
    root = logging.getLogger()
    saved = root.level
    touched = ["gridpath.search.path_search", "gridpath.search.planner"]
    yield
    root.setLevel(saved)
    for name in touched:
        logging.getLogger(name).setLevel(logging.NOTSET)


def test_configure_logging_sets_levels(restore_levels):
    configure_logging(
        LoggingConfig(
            global_level="WARNING",
            module_levels={"gridpath.search.path_search": "debug"},
        )
    )
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("gridpath.search.path_search").level == logging.DEBUG


def test_configure_logging_ignores_bad_levels(restore_levels):
    configure_logging(
        LoggingConfig(global_level="LOUD", module_levels={"gridpath.search.planner": "nope"})
    )
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("gridpath.search.planner").level == logging.NOTSET
