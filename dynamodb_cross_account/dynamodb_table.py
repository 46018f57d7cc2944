# -*- coding: utf-8 -*-

"""
DynamoDB table related functions.
"""

import typing as T
import dataclasses

from .logger import logger


@dataclasses.dataclass(frozen=True)
class TableDescriptor:
    """
    A source table and its ``DescribeTable`` ``Table`` structure.
    """

    name: str
    schema: T.Dict[str, T.Any]

    @property
    def attribute_definitions(self) -> T.List[T.Dict[str, str]]:
        return self.schema.get("AttributeDefinitions", [])


# server assigned or read only fields, ``CreateTable`` rejects them
EXCLUDED_TABLE_FIELDS = (
    "CreationDateTime",
    "ItemCount",
    "LastDecreaseDateTime",
    "LatestStreamArn",
    "LatestStreamLabel",
    "NumberOfDecreasesToday",
    "TableArn",
    "TableId",
    "TableSizeBytes",
    "TableStatus",
)

EXCLUDED_THROUGHPUT_FIELDS = (
    "LastDecreaseDateTime",
    "NumberOfDecreasesToday",
)


def list_table_names(dynamodb_client) -> T.List[str]:
    # ref: https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/dynamodb/paginator/ListTables.html
    table_names = list()
    try:
        paginator = dynamodb_client.get_paginator("list_tables")
        for res in paginator.paginate():
            table_names.extend(res.get("TableNames", []))
    except Exception:
        logger.error("Failed to retrieve tables")
        raise
    return table_names


def describe_table(
    dynamodb_client,
    table_name: str,
) -> TableDescriptor:
    # ref: https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/dynamodb/client/describe_table.html
    res = dynamodb_client.describe_table(TableName=table_name)
    return TableDescriptor(name=table_name, schema=res["Table"])


def enable_point_in_time_recovery(
    dynamodb_client,
    table_name: str,
):
    # ref: https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/dynamodb/client/update_continuous_backups.html
    dynamodb_client.update_continuous_backups(
        TableName=table_name,
        PointInTimeRecoverySpecification=dict(
            PointInTimeRecoveryEnabled=True,
        ),
    )
    logger.info(f"Enabled PITR for table {table_name}")


def disable_point_in_time_recovery(
    dynamodb_client,
    table_name: str,
):
    dynamodb_client.update_continuous_backups(
        TableName=table_name,
        PointInTimeRecoverySpecification=dict(
            PointInTimeRecoveryEnabled=False,
        ),
    )
    logger.info(f"Disabled PITR for table {table_name}")


def enable_dynamodb_stream(
    dynamodb_client,
    table_name: str,
    stream_view_type: str = "NEW_IMAGE",
):
    # ref: https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/dynamodb/client/update_table.html
    dynamodb_client.update_table(
        TableName=table_name,
        StreamSpecification=dict(
            StreamEnabled=True,
            StreamViewType=stream_view_type,
        ),
    )
    logger.info(f"Enabled DynamoDB stream for table {table_name}")


def disable_dynamodb_stream(
    dynamodb_client,
    table_name: str,
):
    dynamodb_client.update_table(
        TableName=table_name,
        StreamSpecification=dict(
            StreamEnabled=False,
        ),
    )
    logger.info(f"Disabled DynamoDB stream for table {table_name}")


def to_create_table_kwargs(table: TableDescriptor) -> T.Dict[str, T.Any]:
    """
    Turn a described table into ``CreateTable`` arguments that reproduce its
    key schema, attribute definitions and capacity settings.

    Only the fields in :data:`EXCLUDED_TABLE_FIELDS` and the decrease counters
    in ``ProvisionedThroughput`` are removed, everything else is kept as is.
    """
    kwargs = dict(TableName=table.name)
    kwargs.update(table.schema)
    for key in EXCLUDED_TABLE_FIELDS:
        kwargs.pop(key, None)
    if "ProvisionedThroughput" in kwargs:
        throughput = dict(kwargs["ProvisionedThroughput"])
        for key in EXCLUDED_THROUGHPUT_FIELDS:
            throughput.pop(key, None)
        kwargs["ProvisionedThroughput"] = throughput
    return kwargs


def create_dynamodb_table(
    dynamodb_client,
    table: TableDescriptor,
):
    # ref: https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/dynamodb/client/create_table.html
    dynamodb_client.create_table(**to_create_table_kwargs(table))
    logger.info(f"Created table {table.name}")


def get_dynamodb_table_console_url(
    aws_region: str,
    table: str,
) -> str:
    return (
        f"https://{aws_region}.console.aws.amazon.com"
        f"/dynamodbv2/home?region={aws_region}#table?name={table}"
    )
