# -*- coding: utf-8 -*-

"""
Run one independent AWS call per table concurrently and wait for all of them.

Any single failure aborts the batch: calls that haven't started are
cancelled, the wait stops, and :class:`~dynamodb_cross_account.exc.TableOperationError`
is raised for the failed table. Calls already in flight are not undone.
"""

import typing as T
from concurrent.futures import ThreadPoolExecutor, wait, FIRST_EXCEPTION

from .exc import TableOperationError
from .logger import logger

T_ITEM = T.TypeVar("T_ITEM")
T_RESULT = T.TypeVar("T_RESULT")


def run_in_parallel(
    func: T.Callable[[T_ITEM], T_RESULT],
    items: T.Sequence[T_ITEM],
    action: str,
    get_name: T.Callable[[T_ITEM], str] = lambda item: item.name,
) -> T.List[T_RESULT]:
    """
    :param func: the per item call.
    :param items: usually a list of ``TableDescriptor``.
    :param action: human readable action name, used in the error message.
    :param get_name: how to get the table name from an item.

    :return: results in the same order as ``items``.
    """
    if len(items) == 0:
        return []

    executor = ThreadPoolExecutor(
        max_workers=len(items),
        thread_name_prefix="ddb-fan-out",
    )
    futures = [executor.submit(func, item) for item in items]
    done, _ = wait(futures, return_when=FIRST_EXCEPTION)

    for item, future in zip(items, futures):
        if future in done and future.exception() is not None:
            table_name = get_name(item)
            logger.error(f"Failed to {action} for table {table_name}")
            executor.shutdown(wait=False, cancel_futures=True)
            raise TableOperationError(action, table_name) from future.exception()

    executor.shutdown(wait=True)
    return [future.result() for future in futures]
