"""Domain models for the time usage pipeline.

Shared record shapes passed between the projector, the aggregators and the
orchestrator.
"""

from .config_models import TimeUsageConfig
from .pipeline_result import PipelineResult
from .time_usage_row import TimeUsageRow

__all__ = [
    # Configuration models
    "TimeUsageConfig",
    # Processing models
    "PipelineResult",
    "TimeUsageRow",
]
