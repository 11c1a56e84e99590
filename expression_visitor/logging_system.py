"""
Logging System for Expression Tree Operations

Centralized logger with verbosity levels. The library defaults to silent so
that only the caller's own output reaches the terminal; callers raise the
level through configure_logging() or set_log_level().
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for expression tree operations"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Only final results and critical info
    MODERATE = 2    # Key milestones
    DETAILED = 3    # Per-traversal information
    VERBOSE = 4     # Everything, including per-node callbacks


class ExpressionTreeLogger:
    """
    Centralized logger for expression tree traversal and operations
    """

    def __init__(self, log_level: LogLevel = LogLevel.SILENT,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.log_file_path = log_file_path

        self.logger = logging.getLogger('expression_visitor')
        self.logger.setLevel(logging.DEBUG)
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_visitor_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            self.log_file_path = log_file_path
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[ExpressionTreeLogger] = None


def get_logger() -> ExpressionTreeLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionTreeLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionTreeLogger(log_level=level)
    else:
        _global_logger = ExpressionTreeLogger(
            log_level=level,
            log_to_file=_global_logger.log_to_file,
            log_file_path=_global_logger.log_file_path
        )


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ExpressionTreeLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = ExpressionTreeLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
