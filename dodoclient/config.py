import os
import re
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from dodoclient.exceptions import ConfigurationError

__all__ = [
    'DEFAULT_FILENAMES',
    'ENVIRONMENT_URLS',
    'ClientSettings',
    'Environment',
    'get_settings',
    'load_yaml',
]

DEFAULT_FILENAMES = ['dodo.yaml', 'dodo.yml']

_ENV_VAR = re.compile(r'\$\{([^}:]+)(?::-([^}]*))?\}')


class Environment(str, Enum):
    LIVE_MODE = 'live_mode'
    TEST_MODE = 'test_mode'


ENVIRONMENT_URLS = {
    Environment.LIVE_MODE: 'https://live.dodopayments.com',
    Environment.TEST_MODE: 'https://test.dodopayments.com',
}


class ClientSettings(BaseSettings):
    """Client configuration read from arguments, files and the environment.

    Environment variables use the ``DODO_PAYMENTS_`` prefix, e.g.
    ``DODO_PAYMENTS_API_KEY`` and ``DODO_PAYMENTS_BASE_URL``.
    """

    model_config = SettingsConfigDict(env_prefix='DODO_PAYMENTS_', extra='ignore')

    api_key: str | None = Field(
        None, description='Bearer token used for the Authorization header.'
    )

    base_url: str | None = Field(
        None, description='Overrides the URL picked from the environment.'
    )

    environment: Environment = Field(
        Environment.LIVE_MODE, description='Which API deployment to talk to.'
    )

    timeout: float = Field(60.0, gt=0, description='Request timeout in seconds.')

    default_headers: dict[str, str] = Field(
        default_factory=dict, description='Headers added to every request.'
    )

    def resolved_base_url(self) -> str:
        return self.base_url or ENVIRONMENT_URLS[self.environment]


def _expand_env_vars(value: str) -> str:
    """Expand ``${VAR}`` and ``${VAR:-default}`` references in ``value``."""

    def replace(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        return os.environ.get(name, default if default is not None else '')

    return _ENV_VAR.sub(replace, value)


def _expand_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, str):
        return _expand_env_vars(data)
    if isinstance(data, dict):
        return {key: _expand_env_vars_recursive(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_expand_env_vars_recursive(item) for item in data]
    return data


def load_yaml(path: str | Path) -> dict:
    import yaml

    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ConfigurationError('Configuration must be a mapping', config_path=str(path))
    return _expand_env_vars_recursive(data)


def _validate(data: dict, config_path: str | None) -> ClientSettings:
    try:
        # __init__ (not model_validate) so environment sources are consulted
        return ClientSettings(**data)
    except ValidationError as e:
        first = e.errors()[0]
        field = '.'.join(str(part) for part in first['loc']) or None
        raise ConfigurationError(
            f'Invalid configuration: {first["msg"]}',
            config_path=config_path,
            field=field,
        ) from e


def get_settings(path: str | None = None) -> ClientSettings:
    """Load settings from a file, ``pyproject.toml`` or the environment.

    Values found in a file are validated on top of the environment, so an
    unset key in the file still falls back to its ``DODO_PAYMENTS_`` variable.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _validate(load_yaml(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return _validate(load_yaml(candidate), str(candidate))

    pyproject_path = Path(cwd) / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        pyproject = tomllib.loads(pyproject_path.read_text())
        tools = pyproject.get('tool', {})

        if 'dodoclient' in tools:
            return _validate(tools['dodoclient'], str(pyproject_path))

    return _validate({}, None)
