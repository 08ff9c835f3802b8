"""ModelScope image generation adapter (submit -> poll -> classify)."""

from .client import ModelScopeProvider
from .poller import ResultPoller
from .settings import ModelScopeSettings
from .submitter import TaskSubmitter

__all__ = ["ModelScopeProvider", "ModelScopeSettings", "ResultPoller", "TaskSubmitter"]
