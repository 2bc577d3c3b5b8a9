"""Tests for configuration profiles."""

import logging
from pathlib import Path

import pytest

from schemagen.logging import JSONFormatter, TextFormatter
from schemagen.store import JsonFileModelLibrary
from schemagen.utils.defaults import DEFAULT_DEV, DEFAULT_PROD, DefaultsProfile, get_profile


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger("schemagen").handlers.clear()


def test_get_profile():
    assert get_profile("prod") is DEFAULT_PROD
    assert get_profile("dev") is DEFAULT_DEV


def test_get_unknown_profile():
    with pytest.raises(ValueError):
        get_profile("staging")


def test_prod_logs_json():
    DEFAULT_PROD.configure_logging()
    logger = logging.getLogger("schemagen")

    assert logger.level == logging.INFO
    assert isinstance(logger.handlers[0].formatter, JSONFormatter)


def test_dev_logs_text():
    DEFAULT_DEV.configure_logging()
    logger = logging.getLogger("schemagen")

    assert logger.level == logging.DEBUG
    assert isinstance(logger.handlers[0].formatter, TextFormatter)


def test_create_library(tmp_path: Path):
    profile = DefaultsProfile(
        mode="dev",
        library_path=str(tmp_path / "models.json"),
        storage_key="models",
    )
    library = profile.create_library()

    assert isinstance(library, JsonFileModelLibrary)
    assert library.path == tmp_path / "models.json"
    assert library.storage_key == "models"
