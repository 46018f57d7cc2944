# -*- coding: utf-8 -*-

import typing as T
from unittest.mock import MagicMock

import pytest

from dynamodb_cross_account.config_define import Config


def make_schema(
    table_name: str,
    attributes: T.List[T.Tuple[str, str]],
) -> T.Dict[str, T.Any]:
    """
    A ``DescribeTable`` ``Table`` structure of a provisioned table.
    """
    return {
        "AttributeDefinitions": [
            {"AttributeName": name, "AttributeType": type_}
            for name, type_ in attributes
        ],
        "TableName": table_name,
        "KeySchema": [{"AttributeName": attributes[0][0], "KeyType": "HASH"}],
        "TableStatus": "ACTIVE",
        "CreationDateTime": "2023-07-29T05:40:00+00:00",
        "ProvisionedThroughput": {
            "LastDecreaseDateTime": "2023-07-29T05:40:00+00:00",
            "NumberOfDecreasesToday": 0,
            "ReadCapacityUnits": 5,
            "WriteCapacityUnits": 5,
        },
        "TableSizeBytes": 0,
        "ItemCount": 0,
        "TableArn": f"arn:aws:dynamodb:us-east-1:111122223333:table/{table_name}",
        "TableId": "e7facaf3-0000-0000-0000-000000000000",
        "LatestStreamLabel": "2023-07-29T05:40:00.000",
        "LatestStreamArn": f"arn:aws:dynamodb:us-east-1:111122223333:table/{table_name}/stream/2023-07-29T05:40:00.000",
        "LastDecreaseDateTime": "2023-07-29T05:40:00+00:00",
        "NumberOfDecreasesToday": 0,
    }


def make_dynamodb_client(schemas: T.Dict[str, T.Dict[str, T.Any]]) -> MagicMock:
    client = MagicMock()
    client.get_paginator.return_value.paginate.return_value = [
        {"TableNames": list(schemas)},
    ]
    client.describe_table.side_effect = lambda TableName: {
        "Table": schemas[TableName]
    }
    return client


def make_bsm(dynamodb_client: T.Optional[MagicMock] = None) -> MagicMock:
    bsm = MagicMock()
    if dynamodb_client is not None:
        bsm.dynamodb_client = dynamodb_client
    return bsm


@pytest.fixture
def schemas() -> T.Dict[str, T.Dict[str, T.Any]]:
    return {
        "Orders": make_schema("Orders", [("id", "S"), ("amount", "N")]),
        "Users": make_schema("Users", [("user_id", "S")]),
    }


@pytest.fixture
def config() -> Config:
    return Config(
        region="us-east-1",
        role_arn="arn:aws:iam::444455556666:role/ddb-copy",
        exports_bucket="my-exports",
        glue_bucket="my-glue-scripts",
        glue_role="arn:aws:iam::444455556666:role/glue",
    )
