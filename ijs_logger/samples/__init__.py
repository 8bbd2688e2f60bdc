"""Usage samples."""

from ijs_logger.samples.logger_example import LoggerExample

__all__ = ['LoggerExample']
