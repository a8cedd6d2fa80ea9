from pathlib import Path
from typing import Any, Dict
import copy
import yaml

DEFAULTS: Dict[str, Any] = {
    "workspace_path": "workspace",
    "saved_variables_file": "SavedVariables/HelloWorld.json",
    "slash_aliases": ["/helloworld", "/hw"],
    "log_file": "helloworld.log",
    "log_level": "INFO",
}


def load_settings(path: str | Path = "settings.yaml") -> Dict[str, Any]:
    settings = copy.deepcopy(DEFAULTS)
    path = Path(path)
    if path.exists():
        data = yaml.safe_load(path.read_text())
        if isinstance(data, dict):
            settings.update(data)
    return settings


def workspace(settings: Dict[str, Any]) -> Path:
    return Path(settings.get("workspace_path", DEFAULTS["workspace_path"]))


def saved_variables_path(settings: Dict[str, Any]) -> Path:
    return workspace(settings) / settings.get("saved_variables_file", DEFAULTS["saved_variables_file"])


def log_path(settings: Dict[str, Any]) -> Path:
    return workspace(settings) / settings.get("log_file", DEFAULTS["log_file"])
