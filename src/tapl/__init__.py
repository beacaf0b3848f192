"""Terms, evaluators and a type checker for small calculi."""

from loguru import logger

# Library use stays quiet; configure_logging() turns it back on.
logger.disable("tapl")
