"""Shared observability helpers."""

from common.observability.metrics import propagation_metrics

__all__ = ["propagation_metrics"]
