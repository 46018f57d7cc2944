# -*- coding: utf-8 -*-

import typing as T

from .config_define import Config
from .logger import logger


def get_glue_job_console_url(
    aws_region: str,
    job_name: str,
) -> str:
    return (
        f"https://{aws_region}.console.aws.amazon.com/gluestudio"
        f"/home?region={aws_region}#/editor/job/{job_name}/script"
    )


def to_create_job_kwargs(
    config: Config,
    table_name: str,
) -> T.Dict[str, T.Any]:
    return dict(
        Name=config.get_glue_job_name(table_name),
        Role=config.glue_role,
        Command={
            "Name": "glueetl",
            "PythonVersion": config.glue_python_version,
            "ScriptLocation": config.get_glue_script_uri(table_name),
        },
        Description=f"Glue job for {table_name}",
        MaxRetries=config.glue_max_retries,
        NumberOfWorkers=config.glue_number_of_workers,
        WorkerType=config.glue_worker_type,
    )


def create_glue_job(
    glue_client,
    config: Config,
    table_name: str,
):
    # ref: https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/glue/client/create_job.html
    kwargs = to_create_job_kwargs(config, table_name)
    glue_client.create_job(**kwargs)
    logger.info(f"Created Glue job for table {table_name}")
    logger.debug(
        "preview glue job at: "
        + get_glue_job_console_url(config.region, kwargs["Name"])
    )
