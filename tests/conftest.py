"""Shared fixtures: a small tagged suite used across the test modules."""

import copy
import logging

import pytest

from hornet.models.suite_models import SuiteDefinition
from hornet.suite import Suite
from hornet.utils.logger import Logger

SUITE_DATA = {
    "version": "hornet-test",
    "tags": [
        {"name": "DOM"},
        {"name": "Canvas", "prettyName": "Canvas 2D"},
        {"name": "Table"},
        {"name": "GMail", "type": "app"},
    ],
    "benchmarks": [
        {
            "name": "Add Rows to Table",
            "filename": "tests/addrow.py",
            "runs": [["250 rows", 250], ["500 rows", 500]],
            "weight": 2,
            "baselineTime": 100,
            "tags": ["DOM", "Table"],
            "issueNumber": 12,
        },
        {
            "name": "Sort Table Rows",
            "filename": "tests/sortrows.py",
            "runs": [["sort", None]],
            "weight": 1,
            "baselineTime": 50,
            "tags": ["table"],
        },
        {
            "name": "Canvas Drawing",
            "filename": "tests/canvasdraw.py",
            "runs": [["draw", None]],
            "weight": 1,
            "baselineTime": 40,
            "tags": ["Canvas"],
        },
        {
            "name": "Mail Thread View",
            "filename": "tests/mailview.py",
            "runs": [["open", None]],
            "weight": 4,
            "baselineTime": 200,
            "tags": ["DOM", "GMail"],
            "extended": True,
        },
    ],
}


@pytest.fixture
def suite_data():
    """A fresh copy of the raw suite data."""
    return copy.deepcopy(SUITE_DATA)


@pytest.fixture
def suite(suite_data):
    """A built suite with every benchmark enabled."""
    return Suite.build(SuiteDefinition.model_validate(suite_data))


@pytest.fixture
def registry(suite):
    return suite.registry


@pytest.fixture
def tags(suite):
    return suite.tags


@pytest.fixture
def codec(suite):
    return suite.codec


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed by a test, e.g. the CLI's stderr handler."""
    yield
    logger = logging.getLogger("hornet")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    Logger._configured = False
