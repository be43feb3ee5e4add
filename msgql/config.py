"""
Settings for msgql are read from the environment, falling back to a ``.env``
file in the working directory and then to the defaults below. For example::

    MSGQL_PORT=8080 MSGQL_PLAYGROUND=false msgql serve
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from starlette.config import Config

from .errors import ImproperlyConfigured
from .service import MIN_ID_BYTES

ENV_FILE = '.env'


@dataclass(frozen=True)
class Settings:
    host: str = '127.0.0.1'
    port: int = 4000
    debug: bool = False
    playground: bool = True
    log_level: str = 'info'
    id_bytes: int = MIN_ID_BYTES


def load_settings(
    env_file: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> Settings:
    if env_file is None and os.path.isfile(ENV_FILE):
        env_file = ENV_FILE
    config = Config(env_file, environ=os.environ if environ is None else environ)
    defaults = Settings()

    try:
        settings = Settings(
            host=config('MSGQL_HOST', default=defaults.host),
            port=config('MSGQL_PORT', cast=int, default=defaults.port),
            debug=config('MSGQL_DEBUG', cast=bool, default=defaults.debug),
            playground=config('MSGQL_PLAYGROUND', cast=bool, default=defaults.playground),
            log_level=config('MSGQL_LOG_LEVEL', default=defaults.log_level).lower(),
            id_bytes=config('MSGQL_ID_BYTES', cast=int, default=defaults.id_bytes),
        )
    except ValueError as exc:
        raise ImproperlyConfigured(str(exc)) from exc

    if settings.id_bytes < MIN_ID_BYTES:
        raise ImproperlyConfigured(
            f'MSGQL_ID_BYTES must be at least {MIN_ID_BYTES}, got {settings.id_bytes}.'
        )
    return settings
