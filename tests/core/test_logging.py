"""Tests for bankey.core.utils.logging."""

import os
import sys

import pytest
from loguru import logger

from bankey.core.config import Config
from bankey.core.utils.logging import resolve_log_file, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_respects_level(tmp_dir):
    log_file = os.path.join(tmp_dir, "bankey.log")
    config = Config(data_dir=tmp_dir, defaults={"logging": {"level": "info", "file": log_file}})

    assert setup_logging(config) == log_file
    logger.debug("hidden detail")
    logger.info("load cycle finished")
    logger.remove()

    with open(log_file) as f:
        content = f.read()
    assert "load cycle finished" in content
    assert "hidden detail" not in content


def test_level_override_beats_config(tmp_dir):
    log_file = os.path.join(tmp_dir, "bankey.log")
    config = Config(data_dir=tmp_dir, defaults={"logging": {"level": "ERROR", "file": log_file}})

    setup_logging(config, level="debug")
    logger.debug("fetch started")
    logger.remove()

    with open(log_file) as f:
        assert "fetch started" in f.read()


def test_bare_file_name_goes_to_log_dir(tmp_dir):
    config = Config(data_dir=tmp_dir, defaults={"logging": {"file": "bankey.log"}})
    assert resolve_log_file(config) == os.path.join(tmp_dir, "logs", "bankey.log")

    assert setup_logging(config) == os.path.join(tmp_dir, "logs", "bankey.log")
    assert os.path.isdir(os.path.join(tmp_dir, "logs"))


def test_no_file_by_default(tmp_dir):
    config = Config(data_dir=tmp_dir)
    assert resolve_log_file(config) is None
    assert setup_logging(config) is None
