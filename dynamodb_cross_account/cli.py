# -*- coding: utf-8 -*-

"""
Command line interface, every option can also be set by an environment
variable of the same name as in the Lambda function configuration.
"""

import click

from . import __version__
from .config_define import Config
from .logger import setup_logger
from .exc import TableOperationError
from .runbook import run

LOG_LEVELS = ["error", "warn", "warning", "info", "debug"]


@click.command()
@click.version_option(version=__version__, prog_name="ddb-cross-account")
@click.option(
    "-o",
    "--operation",
    envvar="operation",
    required=True,
    help="Operation to perform (init/enable/disable)",
)
@click.option(
    "-r",
    "--region",
    envvar="region",
    required=True,
    help="AWS region",
)
@click.option(
    "-i",
    "--role",
    envvar="iamRole",
    default=None,
    help="Destination account IAM role to be assumed",
)
@click.option(
    "--exports_bucket",
    envvar="exportsBucket",
    default=None,
    help="Destination account S3 bucket for DynamoDB exports",
)
@click.option(
    "--glue_bucket",
    envvar="glueBucket",
    default=None,
    help="Destination account S3 bucket for Glue scripts",
)
@click.option(
    "--glue_role",
    envvar="glueRole",
    default=None,
    help="Destination account IAM role to be set for Glue jobs",
)
@click.option(
    "-l",
    "--log",
    envvar="log",
    default="info",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level",
)
@click.option(
    "--pitr/--no-pitr",
    default=True,
    show_default=True,
    help="Enable point-in-time recovery on the source tables",
)
@click.option(
    "--stream/--no-stream",
    default=True,
    show_default=True,
    help="Enable DynamoDB streams on the source tables",
)
def main(
    operation: str,
    region: str,
    role: str,
    exports_bucket: str,
    glue_bucket: str,
    glue_role: str,
    log: str,
    pitr: bool,
    stream: bool,
):
    """
    Copy DynamoDB table schemas from this account to another account.
    """
    config = Config(
        region=region,
        role_arn=role,
        exports_bucket=exports_bucket,
        glue_bucket=glue_bucket,
        glue_role=glue_role,
        log_level=log,
        enable_pitr=pitr,
        enable_stream=stream,
    )
    setup_logger(config.log_level)
    try:
        run(operation, config)
    except TableOperationError as e:
        raise click.ClickException(str(e))


if __name__ == "__main__":
    main()
