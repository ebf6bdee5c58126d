# ArgOpts Command-Line Option Parser — MIT Licensed
"""Global logger instance for ArgOpts."""
import logging

logger: logging.Logger = logging.getLogger("argopts")
