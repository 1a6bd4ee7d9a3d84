import json
from pathlib import Path
from typing import Any, Literal

from platformdirs import user_data_dir
from pydantic import BaseModel, Field, ValidationError

ColorName = Literal[
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"
]


class Settings(BaseModel):
    """look and feel of the selectors"""

    # how long a rejected keystroke stays on screen
    flash_ms: int = Field(default=50, ge=0, le=2000)
    rule: str = "-------------------"
    highlight_color: ColorName = "green"
    alert_color: ColorName = "red"


def get_data_dir() -> Path:
    """returns the application's data directory, ensuring it exists"""
    data_dir = Path(user_data_dir("consolemenu", "consolemenu"))
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_config_path() -> Path:
    return get_data_dir() / "settings.json"


def load_config() -> Settings:
    """reads settings.json, falling back to defaults when it is missing or broken"""
    config_path = get_config_path()
    if not config_path.exists():
        return Settings()

    try:
        data = json.loads(config_path.read_text())
        return Settings.model_validate(data)
    except (json.JSONDecodeError, ValidationError):
        return Settings()


def save_config(settings: Settings) -> None:
    get_config_path().write_text(settings.model_dump_json(indent=4))


def update_config(**changes: Any) -> Settings:
    """applies changes on top of the stored settings, validating the result"""
    merged = load_config().model_dump() | changes
    settings = Settings.model_validate(merged)
    save_config(settings)
    return settings


def reset_config() -> Settings:
    settings = Settings()
    save_config(settings)
    return settings
