from pathlib import Path
import json
import os

from helloworld_core.models import DB_NAME, SavedVariables
from helloworld_app.services.log_config import get_logger

log = get_logger(__name__)


def load_saved_variables(path: str | Path) -> SavedVariables:
    """
    Read the HelloWorldDB record. A missing or malformed file is a first run:
    the caller always gets a usable (possibly empty) record.
    """
    path = Path(path)
    if not path.exists():
        log.info("saved_variables.first_run", path=str(path))
        return SavedVariables()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        log.warning("saved_variables.unreadable", path=str(path), error=str(e))
        return SavedVariables()

    record = data.get(DB_NAME) if isinstance(data, dict) else None
    if not isinstance(record, dict) or not isinstance(record.get("messages"), list):
        log.warning("saved_variables.malformed", path=str(path))
    db = SavedVariables.from_dict(record)
    log.info("saved_variables.loaded", path=str(path), messages=len(db.messages))
    return db


def save_saved_variables(path: str | Path, db: SavedVariables) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(json.dumps({DB_NAME: db.to_dict()}, indent=2), encoding="utf-8")
    os.replace(tmp, path)
    log.info("saved_variables.saved", path=str(path), messages=len(db.messages))
    return path
