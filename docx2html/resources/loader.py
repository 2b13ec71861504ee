import json
import logging
from pathlib import Path
from importlib import resources as res


log = logging.getLogger("docx2html")


RESOURCES_PACKAGE = "docx2html.resources"


def _resource_path(package: str, filename: str) -> Path | None:
    """Return a real filesystem path for a resource using importlib.resources."""
    try:
        resource = res.files(package).joinpath(filename)
        with res.as_file(resource) as path:
            return path
    except Exception as e:
        log.error(f"Resource not found: {package}/{filename}: {e}")
        return None


def load_json(filename: str, package: str = RESOURCES_PACKAGE) -> dict:
    """Load JSON from resources folder."""
    path = _resource_path(package, filename)
    if not path or not path.is_file():
        log.error(f"JSON not found: {package}/{filename}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except Exception as e:
        log.error(f"Failed to load JSON {filename}: {e}")
        return {}
