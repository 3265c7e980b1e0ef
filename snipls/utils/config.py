import copy
import os
from pathlib import Path
from typing import TypedDict

import tomli
import tomli_w


class ServerConfig(TypedDict, total=False):
    log_level: str
    log_file: str


class CompletionConfig(TypedDict, total=False):
    indent: str
    static_snippets: bool


class Config(TypedDict, total=False):
    server: ServerConfig
    completion: CompletionConfig


def get_cache_dir() -> Path:
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        base = Path(xdg)
    else:
        base = Path.home() / ".cache"
    return base / "snipls"


def get_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        base = Path(xdg)
    else:
        base = Path.home() / ".config"
    return base / "snipls"


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def get_log_dir() -> Path:
    return get_cache_dir() / "log"


DEFAULT_CONFIG: Config = {
    "server": {
        "log_level": "info",
        "log_file": "",
    },
    "completion": {
        "indent": "  ",
        "static_snippets": True,
    },
}


def load_config() -> Config:
    config_path = get_config_path()
    config: Config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path.exists():
        with open(config_path, "rb") as f:
            user_config = tomli.load(f)
            _merge_config(config, user_config)

    return config


def save_config(config: Config) -> None:
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)


def _merge_config(base: dict, override: dict) -> None:
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_config(base[key], value)
        else:
            base[key] = value


def get_log_path(config: Config) -> Path:
    log_file = config.get("server", {}).get("log_file")
    if log_file:
        return Path(log_file).expanduser()
    return get_log_dir() / "server.log"
