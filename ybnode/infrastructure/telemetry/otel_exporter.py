"""
OpenTelemetry Exporter for ybnode

Architectural Intent:
- Exports node command metrics to OTLP-compatible backends
- Keeps the most recent metrics in a bounded local buffer for inspection without a collector

Security:
- Endpoint defaults to empty string (must be explicitly configured)
- Non-localhost http:// endpoints rejected unless insecure=True
- Validation in __post_init__ prevents accidental plaintext export
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Optional, Any
from urllib.parse import urlparse
import logging
from datetime import datetime, UTC

logger = logging.getLogger(__name__)


@dataclass
class OTELConfig:
    endpoint: str = ""
    service_name: str = "ybnode"
    environment: str = "development"
    export_interval_millis: int = 5000
    insecure: bool = False
    buffer_size: int = 1000

    def __post_init__(self) -> None:
        if self.buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")
        if self.endpoint:
            parsed = urlparse(self.endpoint)
            is_localhost = parsed.hostname in ("localhost", "127.0.0.1", "::1")
            if parsed.scheme == "http" and not is_localhost and not self.insecure:
                raise ValueError(
                    f"Non-localhost HTTP endpoint '{self.endpoint}' requires "
                    "insecure=True or use https://. "
                    "Set insecure=True to explicitly allow plaintext export."
                )


class OTELExporter:
    """
    OpenTelemetry metrics exporter for node commands.

    Records, per executed command:
    - ybnode.node_command.count (counter)
    - ybnode.node_command.duration_seconds (histogram)
    """

    def __init__(self, config: OTELConfig):
        self.config = config
        self._initialized = False
        self._metrics_buffer: deque[dict[str, Any]] = deque(maxlen=config.buffer_size)
        self._meter: Any = None
        self._instruments: dict[str, Any] = {}

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Initialize the OpenTelemetry SDK with an OTLP metric exporter."""
        if not self.config.endpoint:
            logger.info("OTEL endpoint not configured, telemetry disabled")
            return

        from opentelemetry import metrics
        from opentelemetry.sdk.metrics import MeterProvider
        from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
        from opentelemetry.sdk.resources import Resource, SERVICE_NAME
        from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import (
            OTLPMetricExporter,
        )

        try:
            resource = Resource(
                attributes={
                    SERVICE_NAME: self.config.service_name,
                    "environment": self.config.environment,
                }
            )
            metric_reader = PeriodicExportingMetricReader(
                OTLPMetricExporter(
                    endpoint=self.config.endpoint, insecure=self.config.insecure
                ),
                export_interval_millis=self.config.export_interval_millis,
            )
            provider = MeterProvider(resource=resource, metric_readers=[metric_reader])
            metrics.set_meter_provider(provider)
            self._meter = metrics.get_meter(__name__)
            self._initialized = True
        except Exception as e:
            logger.error("Failed to initialize OTEL: %s", e)
            self._initialized = False

    def _get_instrument(self, name: str, kind: str, unit: str = "") -> Any:
        """Get or create a counter/histogram for a metric name."""
        if name not in self._instruments and self._meter:
            if kind == "counter":
                self._instruments[name] = self._meter.create_counter(name, unit=unit)
            else:
                self._instruments[name] = self._meter.create_histogram(name, unit=unit)
        return self._instruments.get(name)

    def record_metric(
        self,
        name: str,
        value: float,
        kind: str = "histogram",
        unit: str = "",
        attributes: Optional[dict[str, str]] = None,
    ) -> None:
        """Record a metric value."""
        self._metrics_buffer.append(
            {
                "name": name,
                "value": value,
                "unit": unit,
                "attributes": attributes or {},
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

        if self._initialized:
            instrument = self._get_instrument(name, kind, unit)
            if instrument is None:
                return
            if kind == "counter":
                instrument.add(value, attributes=attributes or {})
            else:
                instrument.record(value, attributes=attributes or {})

    def record_node_command(
        self,
        node_name: str,
        verb: str,
        exit_code: int,
        duration_seconds: float,
    ) -> None:
        """Record one executed node command."""
        attributes = {
            "node_name": node_name,
            "verb": verb,
            "exit_code": str(exit_code),
        }
        self.record_metric(
            "ybnode.node_command.count", 1, kind="counter", attributes=attributes
        )
        self.record_metric(
            "ybnode.node_command.duration_seconds",
            duration_seconds,
            unit="s",
            attributes=attributes,
        )

    def flush(self) -> int:
        """Clear the local buffer once the SDK owns export. Returns the count cleared."""
        if not self._initialized:
            return 0

        # PeriodicExportingMetricReader exports on its own schedule.
        exported_count = len(self._metrics_buffer)
        self._metrics_buffer.clear()
        if exported_count:
            logger.debug("Flushed %d buffered metrics", exported_count)
        return exported_count


def create_exporter(
    endpoint: Optional[str] = None,
    insecure: bool = False,
    service_name: str = "ybnode",
) -> OTELExporter:
    """Factory function to create OTEL exporter."""
    config = OTELConfig(
        endpoint=endpoint or "",
        insecure=insecure,
        service_name=service_name,
    )
    exporter = OTELExporter(config)
    exporter.initialize()
    return exporter
