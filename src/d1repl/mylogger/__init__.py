from .mylogger import JSONLinesFormatter, UTCISOFormatter, default_config_path, setup_logging

__all__ = ["JSONLinesFormatter", "UTCISOFormatter", "default_config_path", "setup_logging"]
