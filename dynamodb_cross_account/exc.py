# -*- coding: utf-8 -*-


class TableOperationError(Exception):
    """
    A per-table AWS call failed and aborted the whole batch.
    """

    def __init__(self, action: str, table_name: str):
        self.action = action
        self.table_name = table_name
        super().__init__(f"failed to {action} for table {table_name!r}")
