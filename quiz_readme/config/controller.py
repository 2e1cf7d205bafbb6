import os
from pathlib import Path
from typing import Dict, Any, Optional

from quiz_readme.config.shared_constants import DEFAULT_LOCALE

DEFAULT_SETTINGS = {
    "questions_dir": "questions",
    "readme_path": "README.md",
    "locale": DEFAULT_LOCALE,
}

ENV_VARS = {
    "questions_dir": "QUIZ_README_QUESTIONS_DIR",
    "readme_path": "QUIZ_README_PATH",
    "locale": "QUIZ_README_LOCALE",
}


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Merge defaults, environment variables and explicit overrides (highest wins)."""
    overrides = overrides or {}
    from_env = {key: os.getenv(var) for key, var in ENV_VARS.items()}

    settings = {
        **DEFAULT_SETTINGS,
        **{k: v for k, v in from_env.items() if v},
        **{k: v for k, v in overrides.items() if v is not None},
    }

    settings["questions_dir"] = Path(settings["questions_dir"])
    settings["readme_path"] = Path(settings["readme_path"])
    return settings
