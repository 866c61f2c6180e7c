import asyncio
import functools
from concurrent.futures import Executor
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


async def run_in_threadpool(executor: Optional[Executor], func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a blocking call off the event loop; ``None`` uses the loop's default executor"""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, functools.partial(func, *args, **kwargs))
