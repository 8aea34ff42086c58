from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

import jsonschema

from ..models.intent import DEFAULT_LATITUDE, DEFAULT_LONGITUDE
from ..utils.geolocation import Coordinates
from . import settings

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "search-config.schema.json"
_DEFAULTS_PATH = Path(__file__).parent / "defaults.json"


class ConfigValidationError(Exception):
    pass


@dataclass
class ProviderConfig:
    base_url: str
    timeout: float = 15.0
    headers: Dict[str, str] = field(default_factory=dict)
    default_params: Dict[str, str] = field(default_factory=dict)


@dataclass
class SearchConfig:
    ticketmaster: ProviderConfig
    spotify: ProviderConfig
    default_location: Coordinates = Coordinates(DEFAULT_LATITUDE, DEFAULT_LONGITUDE)
    recommended_radius_km: int = 250
    feed_country_codes: str = "CA,US"


def load_search_config(config_path: Optional[Union[str, Path]] = None) -> SearchConfig:
    path = Path(config_path) if config_path else _DEFAULTS_PATH
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open() as f:
        data = json.load(f)
    _validate_schema(data, path)
    return _deserialize(data)


def _validate_schema(data: dict, path: Path) -> None:
    with _SCHEMA_PATH.open() as f:
        schema = json.load(f)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as exc:
        raise ConfigValidationError(
            f"Config file '{path}' failed schema validation: {exc.message}"
        ) from exc


def _provider(data: dict, default_url: str) -> ProviderConfig:
    return ProviderConfig(
        base_url=data.get("base_url", default_url),
        timeout=float(data.get("timeout", settings.PROVIDER_TIMEOUT)),
        headers=dict(data.get("headers", {})),
        default_params=dict(data.get("default_params", {})),
    )


def _deserialize(data: dict) -> SearchConfig:
    providers = data["providers"]
    location = data["default_location"]
    return SearchConfig(
        ticketmaster=_provider(
            providers["ticketmaster"], settings.TICKETMASTER_BASE_URL
        ),
        spotify=_provider(providers.get("spotify", {}), settings.SPOTIFY_BASE_URL),
        default_location=Coordinates(
            latitude=float(location["latitude"]),
            longitude=float(location["longitude"]),
        ),
        recommended_radius_km=data.get("recommended_radius_km", 250),
        feed_country_codes=data.get("feed_country_codes", "CA,US"),
    )
