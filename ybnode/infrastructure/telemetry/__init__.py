"""
ybnode Telemetry Infrastructure

Architectural Intent:
- OpenTelemetry integration for node command metrics
"""

from ybnode.infrastructure.telemetry.otel_exporter import (
    OTELExporter,
    OTELConfig,
    create_exporter,
)

__all__ = [
    "OTELExporter",
    "OTELConfig",
    "create_exporter",
]
