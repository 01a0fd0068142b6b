import logging
import os
import tempfile

from spine_vec.services.logging_setup import setup_logging


def test_setup_logging_is_idempotent():
    logger = logging.getLogger("spine_vec")
    saved = list(logger.handlers)
    for h in saved:
        logger.removeHandler(h)
    try:
        with tempfile.TemporaryDirectory() as td:
            lg = setup_logging(log_dir=td, log_name="test.log")
            n = len(lg.handlers)
            assert n == 2
            assert setup_logging(log_dir=td, log_name="test.log") is lg
            assert len(lg.handlers) == n
            assert os.path.exists(os.path.join(td, "test.log"))
            for h in list(lg.handlers):
                h.close()
                lg.removeHandler(h)
    finally:
        for h in saved:
            logger.addHandler(h)
