"""JSON document I/O for the preference file.

The preference file is a single JSON object. Reading it never raises:
a missing, unreadable or undecodable file comes back as ``Err`` so the
store above can fall back to an empty document.
"""

import json
from pathlib import Path
from typing import Any

from todopanel.domain.shared import Err, Ok, Result


class JsonStorage:
    """Reads and writes the preference document.

    Knows nothing about tasks or members; values are whatever the
    preference store put there.

    Example:
        storage = JsonStorage()
        result = storage.load_json(config_dir / "prefs.json")
        if isinstance(result, Err):
            logger.warning(result.error)
    """

    def load_json(self, path: Path) -> Result[dict[str, Any], str]:
        """Read the document at ``path``.

        Args:
            path: Preference file to read.

        Returns:
            Ok(dict) with the top-level object, or Err(str) if the file is
            missing, not UTF-8, not JSON, or not a JSON object.
        """
        try:
            if not path.exists():
                return Err(f"File not found: {path}")

            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                return Err(f"Expected a JSON object in {path}, got {type(data).__name__}")
            return Ok(data)

        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        except UnicodeDecodeError as e:
            return Err(f"{path} is not valid UTF-8: {e}")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

    def save_json(self, path: Path, data: dict[str, Any]) -> Result[None, str]:
        """Write the whole document.

        The text goes to a sibling ``.tmp`` file that is then moved over the
        target, so an interrupted write leaves the previous document intact.

        Returns:
            Ok(None) if the file was replaced, Err(str) otherwise.
        """
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
            tmp_path.replace(path)
            return Ok(None)

        except TypeError as e:
            return Err(f"Data not JSON serializable: {e}")
        except PermissionError:
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            return Err(f"Error writing {path}: {e}")
