# store_config.py
from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CLIENT_NAME = "profilechooser"

DEFAULT_CONFIG_TEXT = f"""\
[Logging]
level = {DEFAULT_LOG_LEVEL}

[Pulse]
client_name = {DEFAULT_CLIENT_NAME}
"""

_DEFAULTS = {
    "Logging": {"level": DEFAULT_LOG_LEVEL},
    "Pulse": {"client_name": DEFAULT_CLIENT_NAME},
}


CONFIG_DIR_ENV = "PROFILECHOOSER_CONFIG_DIR"


def user_config_dir(app_name: str) -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / app_name


def log_level(cfg: configparser.ConfigParser) -> str:
    return (cfg.get("Logging", "level", fallback="") or DEFAULT_LOG_LEVEL).strip().upper()


def pulse_client_name(cfg: configparser.ConfigParser) -> str:
    return (cfg.get("Pulse", "client_name", fallback="") or DEFAULT_CLIENT_NAME).strip()


def set_pulse_client_name(cfg: configparser.ConfigParser, name: str) -> bool:
    name = (name or "").strip()
    if not name or name == pulse_client_name(cfg):
        return False
    cfg.set("Pulse", "client_name", name)
    return True


@dataclass(frozen=True)
class ConfigStore:
    app_name: str = "profilechooser"
    filename: str = "profilechooser.cfg"

    @property
    def dir_path(self) -> Path:
        return user_config_dir(self.app_name)

    @property
    def file_path(self) -> Path:
        return self.dir_path / self.filename

    def ensure_exists(self) -> None:
        self.dir_path.mkdir(parents=True, exist_ok=True)
        if not self.file_path.exists():
            self.file_path.write_text(DEFAULT_CONFIG_TEXT, encoding="utf-8")

    def load(self) -> configparser.ConfigParser:
        self.ensure_exists()
        cfg = configparser.ConfigParser()
        cfg.read(self.file_path, encoding="utf-8")

        for section, values in _DEFAULTS.items():
            if not cfg.has_section(section):
                cfg.add_section(section)
            for key, default in values.items():
                cfg.set(section, key, cfg.get(section, key, fallback=default))

        return cfg

    def save(self, cfg: configparser.ConfigParser) -> None:
        self.ensure_exists()
        with self.file_path.open("w", encoding="utf-8") as f:
            cfg.write(f)
