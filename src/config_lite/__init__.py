"""Config Lite - read & save INI-style configuration files"""

from .config import WriteGuard
from .core.store import ConfigStore
from .errors import ConfigLiteError, ErrorKind

__version__ = "1.0.0"
__description__ = "Read & save INI-style configuration files with sections"

__all__ = ["ConfigStore", "ConfigLiteError", "ErrorKind", "WriteGuard", "__version__"]
