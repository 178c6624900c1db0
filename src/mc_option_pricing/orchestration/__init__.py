"""
Run orchestration: single and repeated pricing runs.
"""

from mc_option_pricing.orchestration.runner import (
    NextPayoff,
    OrchestratorConfig,
    RunOrchestrator,
    RunRecord,
)

__all__ = [
    "NextPayoff",
    "OrchestratorConfig",
    "RunOrchestrator",
    "RunRecord",
]
