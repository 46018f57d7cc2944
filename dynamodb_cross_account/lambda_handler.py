# -*- coding: utf-8 -*-

"""
AWS Lambda entry point, handler is
``dynamodb_cross_account.lambda_handler.lambda_handler``.

Example event::

    {"operation": "init", "excludedStreams": []}
"""

from .config_define import Config
from .logger import setup_logger
from .runbook import run


def lambda_handler(event, context):
    config = Config.from_env()
    setup_logger(config.log_level)
    run(
        event.get("operation"),
        config,
        excluded_streams=event.get("excludedStreams"),
    )
