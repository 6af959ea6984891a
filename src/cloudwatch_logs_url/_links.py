from __future__ import annotations

from typing import TYPE_CHECKING

from ._constants import CONSOLE_HOST, LOG_GROUP_ROUTE
from ._encoding import encode_text
from ._log import LOG

if TYPE_CHECKING:
    from ._models import LinkRequest


def create_log_group_url(region: str, log_group_name: str) -> str:
    """
    Return the CloudWatch Logs console URL for a log group.

    Example::

        >>> create_log_group_url('us-east-1', '/aws/lambda/my-fn')
        'https://us-east-1.console.aws.amazon.com/cloudwatch/home?region=us-east-1#logsV2:log-groups/log-group/$252Faws$252Flambda$252Fmy-fn'
    """
    host = CONSOLE_HOST.format(region=region)
    return (f'{host}/cloudwatch/home?region={region}'
            f'{LOG_GROUP_ROUTE}{encode_text(log_group_name)}')


def create_log_events_url(request: LinkRequest) -> str:
    """
    Return the CloudWatch Logs console URL for the log events of a log
    group, optionally narrowed to one stream, a time window and a filter
    pattern.
    """
    url = create_log_group_url(request.region, request.log_group_name)
    url += '/log-events'

    if request.log_stream_name is not None:
        url += f'/{encode_text(request.log_stream_name)}'

    eq = encode_text('=', single_pass=True)
    query: list[str] = []

    # Order is fixed: filterPattern, start, end
    if request.filter_pattern is not None:
        query.append(f'filterPattern{eq}{encode_text(request.filter_pattern)}')
    if request.start is not None:
        query.append(f'start{eq}{request.start}')
    if request.end is not None:
        query.append(f'end{eq}{request.end}')

    if query:
        url += encode_text('?', single_pass=True)
        url += encode_text('&', single_pass=True).join(query)

    LOG.debug('CloudWatch Logs: log events URL for %s (%d query params)',
              request.log_group_name, len(query))

    return url
