import logging
import sys

import pytest
from rich.logging import RichHandler

from argopts.utils import (
    get_program_invocation,
    running_in_container,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_invalid_mode(restore_root_logger):
    handlers = list(restore_root_logger.handlers)
    with pytest.raises(ValueError):
        setup_logging(mode="bogus")
    assert restore_root_logger.handlers == handlers


def test_setup_logging_cli(restore_root_logger):
    setup_logging(mode="cli", console_log_level=logging.INFO)
    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.INFO


def test_setup_logging_json_with_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "argopts.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    handlers = restore_root_logger.handlers
    assert len(handlers) == 2
    assert any(isinstance(handler, logging.FileHandler) for handler in handlers)

    logging.getLogger("argopts").info("hello")
    for handler in handlers:
        handler.flush()
    assert '"message": "hello"' in log_file.read_text(encoding="UTF-8")


def test_setup_logging_env_mode(restore_root_logger, monkeypatch):
    monkeypatch.setenv("ARGOPTS_LOG_MODE", "json")
    setup_logging()
    handler = restore_root_logger.handlers[0]
    assert not isinstance(handler, RichHandler)
    assert isinstance(handler, logging.StreamHandler)


def test_get_program_invocation(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/nonexistent/tool.py"])
    monkeypatch.setattr(sys, "executable", "/usr/bin/python3")
    assert get_program_invocation() == "python /nonexistent/tool.py"

    monkeypatch.setattr(sys, "argv", ["/nonexistent/argopts/__main__.py"])
    assert get_program_invocation() == "python -m argopts"


@pytest.mark.parametrize(
    "content, expected",
    [
        ("0::/docker/abc123\n", True),
        ("0::/kubepods/besteffort/pod1\n", True),
        ("0::/init.scope\n", False),
    ],
)
def test_running_in_container(tmp_path, content, expected):
    cgroup = tmp_path / "cgroup"
    cgroup.write_text(content, encoding="UTF-8")
    assert running_in_container(str(cgroup)) is expected


def test_running_in_container_missing_file(tmp_path):
    assert running_in_container(str(tmp_path / "missing")) is False
