import logging

import pytest


@pytest.fixture
def restore_root_logging():
    """Undo logging.config.dictConfig changes made by the code under test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    pkg = logging.getLogger("ledger_helper")
    saved_pkg_level = pkg.level
    yield
    pkg.setLevel(saved_pkg_level)
    for h in root.handlers[:]:
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
