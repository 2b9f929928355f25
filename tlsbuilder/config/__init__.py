"""
Library boot config. This only covers logging. All ssl settings come from the
SslConfig handed to the builder.
"""

# Local
from .config import configure_logging, library_config


# Delegate attribute access to the library config so that config.log_level
# works on the module
def __getattr__(name):
    if name in library_config or hasattr({}, name):
        return getattr(library_config, name)
    raise AttributeError(f"No such config attribute {name}")


__all__ = ["configure_logging"] + list(library_config.keys())
