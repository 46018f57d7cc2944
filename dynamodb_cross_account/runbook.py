# -*- coding: utf-8 -*-

"""
The named operations and the dispatcher that runs them.

Each stage is a barrier: every per table call of a stage runs concurrently,
and the next stage only starts once all of them succeeded. The first failure
aborts the run, nothing done so far is rolled back.
"""

import typing as T

from boto_session_manager import BotoSesManager

from .config_define import Config
from .logger import logger
from .fan_out import run_in_parallel
from .boto_ses import new_destination_bsm
from .dynamodb_table import (
    TableDescriptor,
    list_table_names,
    describe_table,
    enable_point_in_time_recovery,
    disable_point_in_time_recovery,
    enable_dynamodb_stream,
    disable_dynamodb_stream,
    create_dynamodb_table,
    get_dynamodb_table_console_url,
)
from .glue_script import (
    load_glue_script_template,
    render_glue_script,
    upload_glue_script,
)
from .glue_job import create_glue_job

T_EXCLUDED_STREAMS = T.Optional[T.List[str]]


def discover_tables(dynamodb_client) -> T.List[TableDescriptor]:
    table_names = list_table_names(dynamodb_client)
    logger.debug(f"found {len(table_names)} source tables")
    return run_in_parallel(
        lambda table_name: describe_table(dynamodb_client, table_name),
        table_names,
        action="describe table",
        get_name=lambda table_name: table_name,
    )


def enable_pitr_for_tables(
    dynamodb_client,
    tables: T.List[TableDescriptor],
):
    run_in_parallel(
        lambda table: enable_point_in_time_recovery(dynamodb_client, table.name),
        tables,
        action="enable PITR",
    )
    logger.info(f"Completed enabling PITR for {len(tables)} tables")


def disable_pitr_for_tables(
    dynamodb_client,
    tables: T.List[TableDescriptor],
):
    run_in_parallel(
        lambda table: disable_point_in_time_recovery(dynamodb_client, table.name),
        tables,
        action="disable PITR",
    )
    logger.info(f"Completed disabling PITR for {len(tables)} tables")


def enable_stream_for_tables(
    dynamodb_client,
    tables: T.List[TableDescriptor],
    stream_view_type: str,
):
    run_in_parallel(
        lambda table: enable_dynamodb_stream(
            dynamodb_client,
            table.name,
            stream_view_type=stream_view_type,
        ),
        tables,
        action="enable DynamoDB streams",
    )
    logger.info(f"Completed enabling DynamoDB streams for {len(tables)} tables")


def disable_stream_for_tables(
    dynamodb_client,
    tables: T.List[TableDescriptor],
):
    run_in_parallel(
        lambda table: disable_dynamodb_stream(dynamodb_client, table.name),
        tables,
        action="disable DynamoDB streams",
    )
    logger.info(f"Completed disabling DynamoDB streams for {len(tables)} tables")


def create_missing_tables(
    dynamodb_client,
    tables: T.List[TableDescriptor],
) -> T.List[TableDescriptor]:
    """
    Create every table that doesn't exist in the destination account yet.

    :return: the tables that were created.
    """
    existing_table_names = set(list_table_names(dynamodb_client))
    missing_tables = [
        table for table in tables if table.name not in existing_table_names
    ]
    for table in tables:
        if table.name in existing_table_names:
            logger.debug(f"table {table.name} already exists, skip")
    run_in_parallel(
        lambda table: create_dynamodb_table(dynamodb_client, table),
        missing_tables,
        action="create DynamoDB table",
    )
    logger.info(f"Completed creating {len(missing_tables)} tables")
    return missing_tables


def upload_glue_scripts(
    config: Config,
    bsm: BotoSesManager,
    tables: T.List[TableDescriptor],
):
    template = load_glue_script_template()

    def upload(table: TableDescriptor):
        script = render_glue_script(
            template=template,
            region=config.region,
            exports_location=config.get_exports_location(table.name),
            table_name=table.name,
            attribute_definitions=table.attribute_definitions,
        )
        upload_glue_script(
            bsm=bsm,
            bucket=config.glue_bucket,
            key=config.get_glue_script_key(table.name),
            script=script,
        )
        logger.info(f"Uploaded Glue script for table {table.name}")

    run_in_parallel(upload, tables, action="upload Glue script")
    logger.info(f"Completed creating {len(tables)} Glue script files")


def create_glue_jobs(
    config: Config,
    glue_client,
    tables: T.List[TableDescriptor],
):
    run_in_parallel(
        lambda table: create_glue_job(glue_client, config, table.name),
        tables,
        action="create Glue job",
    )
    logger.info(f"Completed creating {len(tables)} Glue jobs")


def init(
    config: Config,
    excluded_streams: T_EXCLUDED_STREAMS = None,
):
    """
    Prepare the source tables for export and replicate their schemas into the
    destination account, then provision one Glue job per table.
    """
    source_bsm = config.bsm
    dest_bsm = new_destination_bsm(config, source_bsm)

    # boto3 client creation is not thread safe, create them before fan out,
    # s3pathlib uploads reuse dest_bsm.s3_client
    source_dynamodb_client = source_bsm.dynamodb_client
    dest_dynamodb_client = dest_bsm.dynamodb_client
    if config.generate_glue_script:
        dest_bsm.s3_client

    tables = discover_tables(source_dynamodb_client)

    if config.enable_pitr:
        enable_pitr_for_tables(source_dynamodb_client, tables)
    if config.enable_stream:
        enable_stream_for_tables(
            source_dynamodb_client,
            tables,
            stream_view_type=config.stream_view_type,
        )

    created_tables = create_missing_tables(dest_dynamodb_client, tables)
    for table in created_tables:
        url = get_dynamodb_table_console_url(config.region, table.name)
        logger.debug(f"preview table {table.name} at: {url}")

    if config.generate_glue_script:
        upload_glue_scripts(config, dest_bsm, tables)
    else:
        logger.info("no exports bucket or glue bucket given, skip Glue scripts")

    if config.create_glue_job:
        create_glue_jobs(config, dest_bsm.glue_client, tables)
    else:
        logger.info("no glue bucket or glue role given, skip Glue jobs")


def enable(
    config: Config,
    excluded_streams: T_EXCLUDED_STREAMS = None,
):
    """
    Enable PITR and DynamoDB streams on every source table.
    """
    dynamodb_client = config.bsm.dynamodb_client
    tables = discover_tables(dynamodb_client)
    enable_pitr_for_tables(dynamodb_client, tables)
    enable_stream_for_tables(
        dynamodb_client,
        tables,
        stream_view_type=config.stream_view_type,
    )


def disable(
    config: Config,
    excluded_streams: T_EXCLUDED_STREAMS = None,
):
    """
    Disable DynamoDB streams and PITR on every source table.
    """
    dynamodb_client = config.bsm.dynamodb_client
    tables = discover_tables(dynamodb_client)
    disable_stream_for_tables(dynamodb_client, tables)
    disable_pitr_for_tables(dynamodb_client, tables)


OPERATIONS: T.Dict[str, T.Callable[[Config, T_EXCLUDED_STREAMS], None]] = {
    "init": init,
    "enable": enable,
    "disable": disable,
}


def run(
    operation: str,
    config: Config,
    excluded_streams: T_EXCLUDED_STREAMS = None,
):
    """
    Run the named operation. An unknown name is logged and nothing happens.
    """
    func = OPERATIONS.get(operation)
    if func is None:
        logger.error(f"The specified operation ({operation}) is not valid.")
        return None
    logger.debug(f"run operation {operation!r}")
    return func(config, excluded_streams)
