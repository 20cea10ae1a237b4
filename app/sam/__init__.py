"""SAM analytics engine: alerts, stress, recovery, sleep, body composition,
pathology, genetics and weather impact."""

from app.sam.alerts import calculate_readiness_score, generate_alert, get_metric_status

__all__ = ["calculate_readiness_score", "generate_alert", "get_metric_status"]
