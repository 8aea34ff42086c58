from .loader import ConfigValidationError, ProviderConfig, SearchConfig, load_search_config

__all__ = ["ConfigValidationError", "ProviderConfig", "SearchConfig", "load_search_config"]
