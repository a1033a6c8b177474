from .load import load_config
from .model import ConfigLoadError, PreprocessorConfig

__all__ = ["load_config", "ConfigLoadError", "PreprocessorConfig"]
