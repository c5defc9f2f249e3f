"""
middleware/execution_log.py
---------------------------
Timing and outcome logging around command dispatch.
Every dispatch passes through this wrapper exactly once.
"""

import time
from functools import wraps
from typing import Callable

from models.command import Command
from models.execution import ExecutionContext, ExecutionRecord
from utils.logger import get_logger

logger = get_logger(__name__)


def log_execution(record: ExecutionRecord) -> None:
    """Emit the single log line for a finished dispatch."""
    if record.succeeded:
        logger.info(f"✅ [SUCCESS] {record}")
    else:
        logger.error(f"❌ [ERROR] {record}")


def track_execution(func: Callable):
    """
    Decorator that times a dispatch and logs its outcome.

    Usage:
        class CommandDispatcher:
            @track_execution
            async def dispatch(self, command, context):
                ...

    Behavior:
        - Success means the reply was delivered.
        - A failure raised by the wrapped dispatch (reply transport) is
          logged, then re-raised unchanged.
    """
    @wraps(func)
    async def wrapper(self, command: Command, context: ExecutionContext, *args, **kwargs):
        start = time.perf_counter()
        try:
            result = await func(self, command, context, *args, **kwargs)
        except Exception as e:
            log_execution(ExecutionRecord(
                context=context,
                command=command,
                succeeded=False,
                duration_ms=(time.perf_counter() - start) * 1000,
                error=e,
            ))
            raise

        log_execution(ExecutionRecord(
            context=context,
            command=command,
            succeeded=True,
            duration_ms=(time.perf_counter() - start) * 1000,
        ))
        return result

    return wrapper
