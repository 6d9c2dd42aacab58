"""
Webhook configuration stored next to the dictionaries.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger("lotto-relay.config")

CONFIG_FILE = "config.json"
DATA_DIR_ENV = "LOTTO_RELAY_DATA_DIR"
WEBHOOK_ENV = "LOTTO_RELAY_WEBHOOK"


class RelayConfig(BaseModel):
    """Settings persisted in ``config.json``.

    Only the webhook URL is stored; it is asked for once and reused on
    later runs.
    """

    discord_webhook: str = Field(
        default="",
        description="Discord webhook URL the formatted results are posted to"
    )

    @field_validator("discord_webhook", mode="before")
    @classmethod
    def strip_webhook(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def has_webhook(self) -> bool:
        return bool(self.discord_webhook)

    @classmethod
    def load(cls, path: str | Path) -> "RelayConfig":
        """Read the config file, returning defaults if it is missing or invalid."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return cls.model_validate(json.load(f))
        except FileNotFoundError:
            logger.debug(f"📂 No config at {path}, using defaults")
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"⚠️ Invalid config {path}, using defaults: {e}")
        return cls()

    def save(self, path: str | Path) -> bool:
        """Write the config file. Failures are logged, not raised."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning(f"⚠️ Could not save config {path}: {e}")
            return False
        logger.debug(f"💾 Saved config to {path}")
        return True


def data_dir_from_env() -> Path:
    """Directory holding dictionaries and config (``LOTTO_RELAY_DATA_DIR``, default cwd)."""
    return Path(os.getenv(DATA_DIR_ENV, "")).resolve()


def resolve_webhook(config_path: str | Path, prompt: Callable[[str], str] = input) -> str:
    """Find the webhook URL to post to.

    Order: ``LOTTO_RELAY_WEBHOOK`` environment variable, then the stored
    config, then the operator is asked and the answer is stored for next time.

    Args:
        config_path: Location of ``config.json``
        prompt: Function used to ask the operator (``input`` by default)

    Returns:
        Webhook URL, possibly empty if the operator entered nothing
    """
    env_url = os.getenv(WEBHOOK_ENV, "").strip()
    if env_url:
        return env_url

    config = RelayConfig.load(config_path)
    if config.has_webhook:
        return config.discord_webhook

    config.discord_webhook = prompt("🔹 Enter Discord webhook URL: ").strip()
    if config.has_webhook:
        config.save(config_path)
    return config.discord_webhook
