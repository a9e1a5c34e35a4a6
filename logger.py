"""Console logger shared by the classifier app."""

import logging

import config


def setup_logger(name="animal_classifier"):
    _logger = logging.getLogger(name)
    _logger.setLevel(config.LOG_LEVEL)

    if _logger.handlers:
        return _logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.LOG_LEVEL)
    console_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    _logger.addHandler(console_handler)

    # keep app lines out of any root handler so they print once
    _logger.propagate = False

    return _logger


logger = setup_logger()
