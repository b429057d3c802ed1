import asyncio
import concurrent.futures
import functools
from contextvars import copy_context
from typing import Any, Callable, Coroutine, Optional, TypeVar

T = TypeVar("T")


async def run_sync(
    func: Callable[..., T],
    *args,
    thread_pool: Optional[concurrent.futures.Executor] = None,
    **kwargs,
) -> T:
    """
    Run the blocking function in the given thread pool (or the default executor of the running loop)
    and wait for its result without blocking the event loop.
    """
    loop = asyncio.get_running_loop()
    func_wrapped = functools.partial(func, *args, **kwargs)
    return await loop.run_in_executor(thread_pool, copy_context().run, func_wrapped)


def run_coroutine_threadsafe(
    coroutine: Coroutine[Any, Any, T], loop: asyncio.AbstractEventLoop
) -> "concurrent.futures.Future[T]":
    """Schedule the coroutine on the given loop from another thread, and return a future for its result"""
    if loop.is_closed():
        coroutine.close()
        raise RuntimeError("Cannot schedule a coroutine on a closed event loop")
    return asyncio.run_coroutine_threadsafe(coroutine, loop)
