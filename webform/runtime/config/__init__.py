from .config_data import ConfigData, DatabaseConfig

__all__ = ["ConfigData", "DatabaseConfig"]
