from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from os import getenv
from typing import Any

from ._constants import (DEFAULT_REGION_ENV_VAR,
                         LAMBDA_LOG_GROUP_ENV_VAR,
                         LAMBDA_LOG_STREAM_ENV_VAR,
                         LOG_GROUP_ENV_VAR,
                         REGION_ENV_VAR)
from ._links import create_log_events_url, create_log_group_url
from ._log import LOG
from ._time import to_millis

TimeBound = int | datetime | timedelta | None


@dataclass(frozen=True, slots=True)
class LinkRequest:
    region: str
    log_group_name: str
    # if None, show events from all streams in the group
    log_stream_name: str | None = None
    # milliseconds since UNIX epoch; negative is relative to now
    # (ex. the last 30 minutes = -1800000)
    start: TimeBound = None
    end: TimeBound = None
    filter_pattern: str | None = None

    def __post_init__(self):
        # frozen, so bypass the generated __setattr__
        object.__setattr__(self, 'start', to_millis(self.start))
        object.__setattr__(self, 'end', to_millis(self.end))

    @property
    def log_group_url(self) -> str:
        return create_log_group_url(self.region, self.log_group_name)

    @property
    def log_events_url(self) -> str:
        return create_log_events_url(self)


def sniff_region() -> str | None:
    # AWS Region, should be automatically set for AWS Lambda functions
    return getenv(REGION_ENV_VAR) or getenv(DEFAULT_REGION_ENV_VAR)


def _parse_arn_region(arn: str) -> str | None:
    # arn:partition:service:region:account-id:resource
    parts = arn.split(':')
    if len(parts) >= 6:
        return parts[3] or None
    return None


def from_lambda_context(
        context: Any,
        *,
        start: TimeBound = None,
        end: TimeBound = None,
        filter_pattern: str | None = None,
) -> LinkRequest | None:
    """
    Build a :class:`LinkRequest` pointing at the log stream of the current
    AWS Lambda invocation.

    Values on the `context` object win over the environment variables set
    by the Lambda runtime. Returns None if the region or log group can't be
    determined (for example, when running locally).
    """
    region = sniff_region()
    if not region:
        arn = getattr(context, 'invoked_function_arn', None)
        if isinstance(arn, str):
            region = _parse_arn_region(arn)

    lg = getattr(context, 'log_group_name', None) or getenv(LAMBDA_LOG_GROUP_ENV_VAR)
    ls = getattr(context, 'log_stream_name', None) or getenv(LAMBDA_LOG_STREAM_ENV_VAR)

    if not (region and lg):
        LOG.debug('Lambda: no region (%s) or log group (%s) for link',
                  region, lg)
        return None

    return LinkRequest(
        region=region,
        log_group_name=lg,
        log_stream_name=ls or None,
        start=start,
        end=end,
        filter_pattern=filter_pattern,
    )


def from_env(
        *,
        start: TimeBound = None,
        end: TimeBound = None,
        filter_pattern: str | None = None,
) -> LinkRequest | None:
    """
    Build a :class:`LinkRequest` from the environment alone.

    Looks at the variables set by the Lambda runtime first, then
    ``AWS_LOG_GROUP`` for ECS tasks.
    """
    region = sniff_region()
    lg = getenv(LAMBDA_LOG_GROUP_ENV_VAR) or getenv(LOG_GROUP_ENV_VAR)

    if not (region and lg):
        LOG.debug('Environment: no region (%s) or log group (%s) for link',
                  region, lg)
        return None

    return LinkRequest(
        region=region,
        log_group_name=lg,
        log_stream_name=getenv(LAMBDA_LOG_STREAM_ENV_VAR) or None,
        start=start,
        end=end,
        filter_pattern=filter_pattern,
    )
