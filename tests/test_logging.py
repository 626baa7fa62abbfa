#!/usr/bin/env python3
"""test the rich logging bootstrap"""

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from core.logging import setup_logging


def test_setup_logging_installs_single_rich_handler():
    buffer = io.StringIO()
    console = Console(file=buffer, width=200)

    setup_logging("INFO", console=console)
    root = setup_logging("debug", console=console)

    rich_handlers = [handler for handler in root.handlers if isinstance(handler, RichHandler)]
    assert len(rich_handlers) == 1
    assert root.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG

    logging.getLogger("adapters.musicbrainz_client").debug("GET %s", "https://mb.test/ws/2/artist")
    assert "GET https://mb.test/ws/2/artist" in buffer.getvalue()

    setup_logging("WARNING", console=console)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_unknown_level_falls_back_to_warning():
    root = setup_logging("chatty", console=Console(file=io.StringIO()))
    assert root.level == logging.WARNING
