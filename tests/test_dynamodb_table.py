# -*- coding: utf-8 -*-

from unittest.mock import MagicMock

import pytest

from dynamodb_cross_account.dynamodb_table import (
    TableDescriptor,
    EXCLUDED_TABLE_FIELDS,
    list_table_names,
    describe_table,
    enable_point_in_time_recovery,
    disable_point_in_time_recovery,
    enable_dynamodb_stream,
    disable_dynamodb_stream,
    to_create_table_kwargs,
    create_dynamodb_table,
)

from conftest import make_schema, make_dynamodb_client


def test_to_create_table_kwargs():
    schema = make_schema("Orders", [("id", "S"), ("amount", "N")])
    schema["BillingModeSummary"] = {"BillingMode": "PROVISIONED"}
    table = TableDescriptor(name="Orders", schema=schema)

    kwargs = to_create_table_kwargs(table)

    for key in EXCLUDED_TABLE_FIELDS:
        assert key not in kwargs
    assert kwargs["ProvisionedThroughput"] == {
        "ReadCapacityUnits": 5,
        "WriteCapacityUnits": 5,
    }
    # everything else is kept
    assert kwargs["TableName"] == "Orders"
    assert kwargs["KeySchema"] == schema["KeySchema"]
    assert kwargs["AttributeDefinitions"] == schema["AttributeDefinitions"]
    assert kwargs["BillingModeSummary"] == {"BillingMode": "PROVISIONED"}
    assert set(kwargs) == set(schema) - set(EXCLUDED_TABLE_FIELDS)

    # the source schema is untouched
    assert "TableArn" in table.schema
    assert "NumberOfDecreasesToday" in table.schema["ProvisionedThroughput"]


def test_to_create_table_kwargs_without_throughput():
    table = TableDescriptor(
        name="Events",
        schema={
            "TableName": "Events",
            "KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}],
            "AttributeDefinitions": [{"AttributeName": "id", "AttributeType": "S"}],
            "TableStatus": "ACTIVE",
        },
    )
    kwargs = to_create_table_kwargs(table)
    assert "ProvisionedThroughput" not in kwargs
    assert "TableStatus" not in kwargs
    assert kwargs["TableName"] == "Events"


def test_to_create_table_kwargs_keeps_summary_fields():
    # summary and index status fields are passed through as is,
    # CreateTable rejects them for on-demand tables and tables with GSIs
    schema = make_schema("Events", [("id", "S")])
    schema["BillingModeSummary"] = {"BillingMode": "PAY_PER_REQUEST"}
    schema["ProvisionedThroughput"].update(ReadCapacityUnits=0, WriteCapacityUnits=0)
    schema["GlobalSecondaryIndexes"] = [
        {
            "IndexName": "by_status",
            "KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}],
            "Projection": {"ProjectionType": "ALL"},
            "IndexStatus": "ACTIVE",
            "IndexArn": "arn:aws:dynamodb:us-east-1:111122223333:table/Events/index/by_status",
        }
    ]
    kwargs = to_create_table_kwargs(TableDescriptor(name="Events", schema=schema))
    assert kwargs["BillingModeSummary"] == {"BillingMode": "PAY_PER_REQUEST"}
    assert kwargs["ProvisionedThroughput"] == {
        "ReadCapacityUnits": 0,
        "WriteCapacityUnits": 0,
    }
    assert kwargs["GlobalSecondaryIndexes"][0]["IndexStatus"] == "ACTIVE"


def test_list_table_names():
    client = make_dynamodb_client({})
    client.get_paginator.return_value.paginate.return_value = [
        {"TableNames": ["a", "b"]},
        {"TableNames": ["c"]},
        {},
    ]
    assert list_table_names(client) == ["a", "b", "c"]
    client.get_paginator.assert_called_once_with("list_tables")


def test_list_table_names_error():
    client = MagicMock()
    client.get_paginator.side_effect = RuntimeError("AccessDenied")
    with pytest.raises(RuntimeError):
        list_table_names(client)


def test_describe_table():
    schema = make_schema("Orders", [("id", "S")])
    client = make_dynamodb_client({"Orders": schema})
    table = describe_table(client, "Orders")
    assert table.name == "Orders"
    assert table.schema == schema
    assert table.attribute_definitions == [
        {"AttributeName": "id", "AttributeType": "S"}
    ]


def test_table_settings():
    client = MagicMock()

    enable_point_in_time_recovery(client, "Orders")
    client.update_continuous_backups.assert_called_with(
        TableName="Orders",
        PointInTimeRecoverySpecification={"PointInTimeRecoveryEnabled": True},
    )
    disable_point_in_time_recovery(client, "Orders")
    client.update_continuous_backups.assert_called_with(
        TableName="Orders",
        PointInTimeRecoverySpecification={"PointInTimeRecoveryEnabled": False},
    )

    enable_dynamodb_stream(client, "Orders")
    client.update_table.assert_called_with(
        TableName="Orders",
        StreamSpecification={"StreamEnabled": True, "StreamViewType": "NEW_IMAGE"},
    )
    disable_dynamodb_stream(client, "Orders")
    client.update_table.assert_called_with(
        TableName="Orders",
        StreamSpecification={"StreamEnabled": False},
    )


def test_create_dynamodb_table():
    client = MagicMock()
    table = TableDescriptor(
        name="Orders",
        schema=make_schema("Orders", [("id", "S")]),
    )
    create_dynamodb_table(client, table)
    client.create_table.assert_called_once_with(**to_create_table_kwargs(table))


if __name__ == "__main__":
    from dynamodb_cross_account.tests import run_cov_test

    run_cov_test(__file__, "dynamodb_cross_account.dynamodb_table")
