"""Top-level package for CloudWatch Logs URL."""
from __future__ import annotations

__all__ = [
    'create_log_group_url',
    'create_log_events_url',
    'encode_text',
    # Classes
    'LinkRequest',
    # runtime helpers
    'from_lambda_context',
    'from_env',
    'sniff_region',
    # time helpers
    'epoch_millis',
    'relative_millis',
    'to_millis',
]

from logging import NullHandler

from ._encoding import encode_text
from ._links import create_log_events_url, create_log_group_url
from ._log import LOG
from ._models import LinkRequest, from_env, from_lambda_context, sniff_region
from ._time import epoch_millis, relative_millis, to_millis


# Set up logging to ``/dev/null`` like a library is supposed to.
# http://docs.python.org/3.3/howto/logging.html#configuring-logging-for-a-library
LOG.addHandler(NullHandler())


def version():
    from importlib.metadata import version
    __version__ = version('cloudwatch-logs-url')
    return __version__
