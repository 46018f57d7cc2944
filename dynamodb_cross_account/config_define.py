# -*- coding: utf-8 -*-

"""
Project level configuration.
"""

import typing as T
import os
import dataclasses
from functools import cached_property

from boto_session_manager import BotoSesManager


@dataclasses.dataclass
class Config:
    """
    Configuration of a single run, built once at startup and passed into
    every component.

    :param region: AWS region of both the source and the destination tables.
    :param role_arn: destination account IAM role to assume. If not given,
        the destination is the source account itself.
    :param exports_bucket: destination account S3 bucket for DynamoDB exports.
    :param glue_bucket: destination account S3 bucket for Glue scripts.
    :param glue_role: IAM role the Glue jobs run as.
    :param log_level: error / warn / info / debug.
    """

    region: str
    role_arn: T.Optional[str] = None
    exports_bucket: T.Optional[str] = None
    glue_bucket: T.Optional[str] = None
    glue_role: T.Optional[str] = None
    log_level: str = "info"
    enable_pitr: bool = True
    enable_stream: bool = True
    stream_view_type: str = "NEW_IMAGE"
    glue_worker_type: str = "G.1X"
    glue_number_of_workers: int = 10
    glue_max_retries: int = 0
    glue_python_version: str = "3"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Build the config from the Lambda function environment variables.
        """
        return cls(
            region=os.environ.get("region", os.environ.get("AWS_REGION")),
            role_arn=os.environ.get("iamRole"),
            exports_bucket=os.environ.get("exportsBucket"),
            glue_bucket=os.environ.get("glueBucket"),
            glue_role=os.environ.get("glueRole"),
            log_level=os.environ.get("log", "info"),
        )

    @cached_property
    def bsm(self) -> BotoSesManager:
        """
        Boto session of the source account, from the default credential chain.
        """
        return BotoSesManager(region_name=self.region)

    @property
    def generate_glue_script(self) -> bool:
        return bool(self.exports_bucket) and bool(self.glue_bucket)

    @property
    def create_glue_job(self) -> bool:
        return bool(self.glue_bucket) and bool(self.glue_role)

    def get_exports_location(self, table_name: str) -> str:
        return f"{self.exports_bucket}/exports/{table_name}/"

    def get_glue_script_key(self, table_name: str) -> str:
        return f"glue-script-{table_name}.py"

    def get_glue_script_uri(self, table_name: str) -> str:
        return f"s3://{self.glue_bucket}/{self.get_glue_script_key(table_name)}"

    def get_glue_job_name(self, table_name: str) -> str:
        return f"ddb-job-{table_name}"
