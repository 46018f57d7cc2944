# -*- coding: utf-8 -*-

from .config_define import Config
from .exc import TableOperationError
from .logger import setup_logger
from .boto_ses import Credentials
from .boto_ses import get_cross_account_credentials
from .boto_ses import new_destination_bsm
from .dynamodb_table import TableDescriptor
from .dynamodb_table import to_create_table_kwargs
from .glue_script import get_glue_type
from .glue_script import render_glue_script
from .fan_out import run_in_parallel
from .runbook import init
from .runbook import enable
from .runbook import disable
from .runbook import run
