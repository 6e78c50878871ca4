"""frpconf - Permission-gated access to frp client/server config files"""

__version__ = "1.0.0"
__description__ = "Permission-gated access to frp client/server config files"

__all__ = ["ConfigProvider", "ConfigType", "__version__"]


def __getattr__(name: str):
    """Lazy imports so importing frpconf does not load dotenv or the CLI stack."""
    if name == "ConfigProvider":
        from .core.provider import ConfigProvider

        return ConfigProvider
    if name == "ConfigType":
        from .core.config_type import ConfigType

        return ConfigType
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
