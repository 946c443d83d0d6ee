"""
Database Query Performance Monitor

Provides a decorator for timing store operations against MongoDB.
Slow operations are logged as warnings, failures as errors.
"""

import time
from functools import wraps

from exceptions import BlogAPIException
from logging_config import logger


class QueryPerformanceMonitor:
    """Monitor and log database query performance"""

    # Threshold in seconds for what constitutes a "slow" query
    SLOW_QUERY_THRESHOLD = 1.0

    @staticmethod
    def monitor_query(operation_name: str, slow_threshold: float | None = None):
        """
        Decorator to monitor database query performance

        Args:
            operation_name: Descriptive name of the operation being monitored
            slow_threshold: Override default slow query threshold in seconds

        Usage:
            @monitor_query("blogposts.find_by_id")
            async def find_by_id(self, post_id):
                ...
        """

        def decorator(func):
            @wraps(func)
            async def wrapper(*args, **kwargs):
                threshold = slow_threshold or QueryPerformanceMonitor.SLOW_QUERY_THRESHOLD
                start_time = time.perf_counter()
                try:
                    result = await func(*args, **kwargs)
                except BlogAPIException as e:
                    if e.status_code < 500:
                        logger.debug(f"Query finished: {operation_name} raised {e.__class__.__name__}")
                        raise
                    elapsed = time.perf_counter() - start_time
                    logger.error(f"Query failed: {operation_name} after {elapsed:.3f}s ({e.message})")
                    raise
                except Exception as e:
                    elapsed = time.perf_counter() - start_time
                    logger.error(
                        f"Query failed: {operation_name} after {elapsed:.3f}s ({e.__class__.__name__})"
                    )
                    raise

                elapsed = time.perf_counter() - start_time
                if elapsed > threshold:
                    logger.warning(
                        f"Slow query detected: {operation_name} took {elapsed:.3f}s "
                        f"(threshold {threshold}s)"
                    )
                else:
                    logger.debug(f"Query completed: {operation_name} in {elapsed:.3f}s")
                return result

            return wrapper

        return decorator


# Convenience function for direct usage
monitor_query = QueryPerformanceMonitor.monitor_query
