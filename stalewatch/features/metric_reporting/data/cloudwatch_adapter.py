import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from stalewatch.core.config.settings import settings
from ..domain.interfaces import IMetricClient
from ..domain.models import MetricSample, TransportError

logger = logging.getLogger(__name__)

class CloudWatchMetricClient(IMetricClient):
    """
    Concrete implementation of IMetricClient using CloudWatch PutMetricData.
    Credentials and timeouts come from the standard boto3 chain.
    """

    def __init__(self, namespace: Optional[str] = None, client=None):
        self.namespace = namespace or settings.METRIC_NAMESPACE
        self.client = client or boto3.client("cloudwatch", region_name=settings.AWS_REGION)

    def submit(self, sample: MetricSample) -> None:
        metric_datum = {
            "MetricName": sample.metric_name,
            "Dimensions": [
                {"Name": name, "Value": value}
                for name, value in sample.dimensions.items()
            ],
            "Timestamp": sample.timestamp,
            "Value": sample.value,
            "Unit": sample.unit,
        }

        logger.debug(f"PutMetricData {self.namespace}/{sample.metric_name}={sample.value} {sample.dimensions}")

        try:
            self.client.put_metric_data(Namespace=self.namespace, MetricData=[metric_datum])
        except (ClientError, BotoCoreError) as e:
            logger.error(f"CloudWatch rejected {sample.metric_name} for {sample.dimensions}: {e}")
            raise TransportError(f"Metric submission failed: {e}") from e
