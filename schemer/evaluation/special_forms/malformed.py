import logging

from schemer.errors import SchemerSyntaxError

logger = logging.getLogger(__name__)


def malformed(form: str, message: str) -> SchemerSyntaxError:
    """Log a malformed special form at DEBUG and build the error to raise."""
    logger.debug("Malformed (%s ...): %s", form, message)
    return SchemerSyntaxError(message)
