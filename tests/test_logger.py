import logging

import pytest

from utils.logger import _resolve_level, get_logger


@pytest.mark.parametrize(
    "name, level",
    [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("LOUD", logging.INFO)],
)
def test_resolve_level(name, level):
    assert _resolve_level(name) == level


def test_get_logger_is_named():
    assert get_logger("repositories.customer_repo").name == "repositories.customer_repo"
