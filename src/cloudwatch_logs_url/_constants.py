# Console host, `region` is substituted unencoded
CONSOLE_HOST = 'https://{region}.console.aws.amazon.com'

# Fragment route for a single log group in the Logs V2 console
LOG_GROUP_ROUTE = '#logsV2:log-groups/log-group/'

# AWS Region, should be automatically set for AWS Lambda functions
REGION_ENV_VAR = 'AWS_REGION'
DEFAULT_REGION_ENV_VAR = 'AWS_DEFAULT_REGION'

# Set by the AWS Lambda runtime
LAMBDA_LOG_GROUP_ENV_VAR = 'AWS_LAMBDA_LOG_GROUP_NAME'
LAMBDA_LOG_STREAM_ENV_VAR = 'AWS_LAMBDA_LOG_STREAM_NAME'

# (ECS Tasks) Optional name of the AWS log group
LOG_GROUP_ENV_VAR = 'AWS_LOG_GROUP'
