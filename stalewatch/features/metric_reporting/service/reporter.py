import logging
from datetime import timezone
from typing import Iterable, Optional

from stalewatch.core.config.settings import settings
from stalewatch.features.staleness.domain.models import ScanResult

from ..domain.interfaces import IMetricClient
from ..domain.models import HostIdentity, MetricSample, ReportSummary, TransportError

logger = logging.getLogger(__name__)


class MetricReporter:
    """
    Turns ScanResults into OldFileCount samples and hands them to the backend.

    Policies:
    - report_error_states: error results are sent with the -1 sentinel
      (dashboards expect a point per folder). When False they are skipped.
    - stop_on_failure: the first TransportError ends the batch; remaining
      samples are counted as aborted. When False, every sample is attempted.
    """

    def __init__(self,
                 client: IMetricClient,
                 report_error_states: Optional[bool] = None,
                 stop_on_failure: Optional[bool] = None,
                 metric_name: Optional[str] = None):
        self.client = client
        self.report_error_states = settings.REPORT_ERROR_STATES if report_error_states is None else report_error_states
        self.stop_on_failure = settings.STOP_ON_REPORT_FAILURE if stop_on_failure is None else stop_on_failure
        self.metric_name = metric_name or settings.METRIC_NAME

    def build_sample(self, result: ScanResult, host: HostIdentity) -> MetricSample:
        timestamp = result.scanned_at
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        return MetricSample(
            metric_name=self.metric_name,
            value=result.stale_count,
            timestamp=timestamp.astimezone(timezone.utc),
            dimensions={
                "InstanceId": host.instance_id,
                "FolderPath": result.directory_path,
                "InstanceName": host.instance_name,
            }
        )

    def report(self, result: ScanResult, host: HostIdentity) -> MetricSample:
        """
        Submits one result.

        Raises:
            TransportError: If the backend did not accept the sample.
        """
        sample = self.build_sample(result, host)
        self.client.submit(sample)
        return sample

    def report_batch(self, results: Iterable[ScanResult], host: HostIdentity) -> ReportSummary:
        summary = ReportSummary()
        pending = list(results)

        for index, result in enumerate(pending):
            if not result.ok and not self.report_error_states:
                logger.info(f"Not reporting {result.directory_path} ({result.status.value})")
                summary.skipped += 1
                continue

            try:
                self.report(result, host)
                summary.submitted += 1
            except TransportError as e:
                error_msg = f"Failed to report {result.directory_path}: {e}"
                logger.error(error_msg)
                summary.failed += 1
                summary.errors.append(error_msg)

                if self.stop_on_failure:
                    summary.aborted = len(pending) - index - 1
                    if summary.aborted:
                        logger.warning(f"Aborting reporting; {summary.aborted} samples not sent.")
                    break

        logger.info(f"Reporting complete. Sent {summary.submitted}/{len(pending)} samples.")
        return summary
