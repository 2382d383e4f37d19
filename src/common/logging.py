import asyncio
import logging
import time
from functools import wraps
from typing import Callable

def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Sets up a logger with a standard format.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger

def log_execution_time(logger: logging.Logger, threshold: float = 0.5):
    """
    Decorator to measure and log execution time of a function.
    Works for both plain and coroutine functions.
    """
    def _report(name: str, elapsed: float):
        if logger.isEnabledFor(logging.DEBUG) or elapsed > threshold:
            logger.debug(f"{name} executed in {elapsed:.3f}s")

    def decorator(func: Callable):
        if asyncio.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                start = time.perf_counter()
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    logger.error(f"{func.__name__} failed: {e}", exc_info=True)
                    raise
                finally:
                    _report(func.__name__, time.perf_counter() - start)
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} failed: {e}", exc_info=True)
                raise
            finally:
                _report(func.__name__, time.perf_counter() - start)
        return wrapper
    return decorator
