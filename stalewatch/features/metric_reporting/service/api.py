from ..domain.interfaces import IMetricClient
from ..data.cloudwatch_adapter import CloudWatchMetricClient
from ..data.logging_client import LoggingMetricClient

def build_metric_client(namespace: str, dry_run: bool = False) -> IMetricClient:
    """
    Public Service API: the CloudWatch client, or a logging sink for dry runs.
    """
    if dry_run:
        return LoggingMetricClient(namespace)
    return CloudWatchMetricClient(namespace=namespace)
