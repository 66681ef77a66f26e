from apphub_core.config import HubConfig, load_hub_config
from apphub_core.home import HubPaths, resolve_apps_root, resolve_hub_paths

__version__ = "0.1.0"

__all__ = [
    "HubConfig",
    "HubPaths",
    "__version__",
    "load_hub_config",
    "resolve_apps_root",
    "resolve_hub_paths",
]
