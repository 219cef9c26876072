from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from models import NanPolicy


class Settings(BaseSettings):
    """
    ライブラリ全体の既定値
    環境変数 DS_LOG_LEVEL / DS_RING_CAPACITY / DS_NAN_POLICY で上書きできる
    """

    model_config = SettingsConfigDict(env_prefix="DS_", frozen=True)

    log_level: str = Field(default="WARNING", description="Level passed to logging.basicConfig")
    ring_capacity: int = Field(default=16, gt=0, description="Default CircularQueue capacity")
    nan_policy: NanPolicy = Field(default=NanPolicy.REJECT, description="Default policy of is_sorted")

    @field_validator("log_level", mode="before")
    @classmethod
    def known_log_level(cls, v):
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("nan_policy", mode="before")
    @classmethod
    def lowercase_nan_policy(cls, v):
        # "LAST" でも "last" でも受け付ける
        if isinstance(v, str):
            return v.strip().lower()
        return v


def configure_logging(config: Optional[Settings] = None) -> None:
    """
    アプリ／テスト側から呼ぶ用。ライブラリ自身はハンドラを設定しない
    """
    config = config or settings
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# import 時に検証される
settings = Settings()
