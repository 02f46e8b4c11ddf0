#!/usr/bin/env python3
"""
System Monitoring Module

Utilities for reading process resource usage, attached as metrics to the log
records written while a corpus is being trained.
"""

import os
import time
import threading
import psutil
from datetime import datetime


class ResourceMonitor:
    """
    Reports memory and CPU usage of the current process.

    Args:
        logger: Logger instance for recording resource metrics
        memory_limit_mb (int, optional): Explicit memory threshold in MB
        memory_limit_percentage (float): Percentage of system memory to use if threshold not specified
    """

    def __init__(self, logger, memory_limit_mb=None, memory_limit_percentage=85):
        self.logger = logger
        self.process = psutil.Process(os.getpid())

        system_memory = psutil.virtual_memory()
        self.total_system_memory_mb = system_memory.total / (1024 * 1024)

        if memory_limit_mb:
            self.memory_limit_mb = memory_limit_mb
        else:
            self.memory_limit_mb = int(
                self.total_system_memory_mb * (memory_limit_percentage / 100))

        # Track the operation being timed
        self.current_operation = None
        self.operation_start_time = None

    def get_current_memory_usage(self):
        """
        Get current process memory usage.

        Returns:
            dict: Memory usage statistics in MB and percentages
        """
        current_memory_mb = self.process.memory_info().rss / (1024 * 1024)
        return {
            "current_mb": current_memory_mb,
            "percent_used": (current_memory_mb / self.total_system_memory_mb) * 100,
            "system_percent_used": psutil.virtual_memory().percent,
            "limit_mb": self.memory_limit_mb
        }

    def get_resource_usage(self):
        """
        Get resource usage statistics.

        Returns:
            dict: Resource usage metrics for memory, CPU and the running operation
        """
        usage = {
            "timestamp": datetime.now().isoformat(),
            "memory": self.get_current_memory_usage(),
            "cpu": {
                # Non-blocking: percentage since the previous call
                "process_percent": self.process.cpu_percent(interval=None),
                "logical_cores": psutil.cpu_count(logical=True)
            },
            "threads": threading.active_count(),
            "process_id": os.getpid()
        }
        if self.current_operation:
            usage["operation"] = {
                "name": self.current_operation,
                "elapsed_seconds": time.time() - self.operation_start_time
            }
        return usage

    def start(self, operation_name):
        """Mark the start of a timed operation."""
        self.current_operation = operation_name
        self.operation_start_time = time.time()
        self.logger.info(f"Started {operation_name}", extra={
            "metrics": self.get_resource_usage()
        })

    def stop(self):
        """
        Mark the end of the current operation.

        Returns:
            float: Elapsed seconds, or 0.0 if nothing was running
        """
        if not self.current_operation:
            return 0.0
        elapsed = time.time() - self.operation_start_time
        self.logger.info(f"Finished {self.current_operation}", extra={
            "metrics": {"elapsed_seconds": elapsed, **self.get_resource_usage()}
        })
        self.current_operation = None
        self.operation_start_time = None
        return elapsed

    def check_memory_health(self):
        """
        Check if memory usage is within the configured limit.

        Returns:
            tuple: (is_healthy, memory_usage_dict, warning_message)
        """
        memory_usage = self.get_current_memory_usage()
        if memory_usage["current_mb"] > 0.9 * self.memory_limit_mb:
            message = (f"WARNING: Memory usage at {memory_usage['current_mb']:.2f} MB, "
                       f"{(memory_usage['current_mb'] / self.memory_limit_mb) * 100:.1f}% of limit")
            self.logger.warning(message, extra={"metrics": memory_usage})
            return False, memory_usage, message
        return True, memory_usage, None
