from .loader import ConfigLoaderError, load_config, load_config_reference, load_hydra_config
from .schema import GeneratorConfig

__all__ = [
    "ConfigLoaderError",
    "GeneratorConfig",
    "load_config",
    "load_config_reference",
    "load_hydra_config",
]
