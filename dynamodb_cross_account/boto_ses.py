# -*- coding: utf-8 -*-

"""
Source and destination account boto sessions.
"""

import time
import dataclasses

from boto_session_manager import BotoSesManager

from .config_define import Config
from .logger import logger


@dataclasses.dataclass(frozen=True)
class Credentials:
    access_key_id: str
    secret_access_key: str
    session_token: str


def get_cross_account_credentials(
    bsm: BotoSesManager,
    role_arn: str,
) -> Credentials:
    """
    Exchange the caller identity for temporary credentials of the destination
    account role. Authorization errors propagate as is.
    """
    timestamp = int(time.time() * 1000)
    # ref: https://boto3.amazonaws.com/v1/documentation/api/latest/reference/services/sts/client/assume_role.html
    res = bsm.sts_client.assume_role(
        RoleArn=role_arn,
        RoleSessionName=f"ddb-utility-{timestamp}",
    )
    return Credentials(
        access_key_id=res["Credentials"]["AccessKeyId"],
        secret_access_key=res["Credentials"]["SecretAccessKey"],
        session_token=res["Credentials"]["SessionToken"],
    )


def new_destination_bsm(
    config: Config,
    source_bsm: BotoSesManager,
) -> BotoSesManager:
    if not config.role_arn:
        logger.debug("no destination role given, use the source account")
        return source_bsm
    credentials = get_cross_account_credentials(source_bsm, config.role_arn)
    logger.debug(f"assumed destination role {config.role_arn}")
    return BotoSesManager(
        aws_access_key_id=credentials.access_key_id,
        aws_secret_access_key=credentials.secret_access_key,
        aws_session_token=credentials.session_token,
        region_name=config.region,
    )
