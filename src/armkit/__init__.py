"""Async clients and CLI for Azure Resource Manager resource providers."""

from loguru import logger

__version__ = "0.3.0"

# Silent as a library until an application opts in with logger.enable("armkit").
logger.disable("armkit")
