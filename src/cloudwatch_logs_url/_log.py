from logging import getLogger

LOG = getLogger('cloudwatch_logs_url')
