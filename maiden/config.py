from __future__ import annotations

import posixpath

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='MAIDEN_', env_file='.env', env_file_encoding='utf-8', extra='ignore')

    app_name: str = 'maiden'
    version: str = '0.0.2'
    host: str = '0.0.0.0'
    port: int = Field(default=5000, ge=1, le=65535)
    data_dir: str = 'data/'
    app_dir: str = 'app/'
    doc_dir: str = 'doc/'
    debug: bool = False
    api_root: str = '/api/v1'
    cors_origins: str = ''

    @property
    def api_prefix(self) -> str:
        return posixpath.join(self.api_root, 'dust')


settings = Settings()
