"""Configuration and result contracts.

Keep module imports explicit in most of the codebase:
    from stratval.contracts.split_configs import HoldoutSplitConfig
The names re-exported here are a small convenience namespace.
"""

from .split_configs import HoldoutSplitConfig, clamp_train_frac, make_split_config
from .results import HoldoutResult

__all__ = ["HoldoutSplitConfig", "clamp_train_frac", "make_split_config", "HoldoutResult"]
