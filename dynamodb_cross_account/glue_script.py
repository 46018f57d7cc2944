# -*- coding: utf-8 -*-

"""
Render the per table Glue ETL script and upload it to S3.

Only the key attributes (``AttributeDefinitions``) are mapped, and only the
``N``, ``S`` and ``BOOL`` DynamoDB types have a dedicated Glue type.
"""

import typing as T

from s3pathlib import S3Path
from boto_session_manager import BotoSesManager

from .paths import path_glue_script_template
from .logger import logger

GLUE_TYPE_MAPPING = {
    "N": "long",
    "S": "string",
    "BOOL": "boolean",
}


def get_glue_type(attribute_type: str) -> str:
    return GLUE_TYPE_MAPPING.get(attribute_type, "string")


def build_mappings(
    attribute_definitions: T.Iterable[T.Dict[str, str]],
) -> str:
    """
    Build the ``ApplyMapping`` mapping list body, for example::

        ("Item.id.S", "string", "id", "string"),("Item.amount.N", "string", "amount", "long")
    """
    mappings = list()
    for attribute in attribute_definitions:
        name = attribute["AttributeName"]
        type_ = attribute["AttributeType"]
        mappings.append(
            f'("Item.{name}.{type_}", "string", "{name}", "{get_glue_type(type_)}")'
        )
    return ",".join(mappings)


def load_glue_script_template() -> str:
    return path_glue_script_template.read_text()


def render_glue_script(
    template: str,
    region: str,
    exports_location: str,
    table_name: str,
    attribute_definitions: T.Iterable[T.Dict[str, str]],
) -> str:
    substitutions = {
        "%%REGION%%": region,
        "%%EXPORTS_BUCKET%%": exports_location,
        "%%TABLE%%": table_name,
        "%%MAPPINGS%%": build_mappings(attribute_definitions),
    }
    script = template
    for placeholder, value in substitutions.items():
        script = script.replace(placeholder, value)
    return script


def upload_glue_script(
    bsm: BotoSesManager,
    bucket: str,
    key: str,
    script: str,
) -> S3Path:
    s3path = S3Path(bucket, key)
    s3path.write_text(
        script,
        content_type="text/plain",
        bsm=bsm,
    )
    logger.debug(f"preview glue script at: {s3path.console_url}")
    return s3path
