import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from json_classifier.classifier.errors import ConfigurationError
from json_classifier.classifier.layer import DEFAULT_CLASSIFIER_MODEL

API_KEY_ENV = "API_KEY"
GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
CLASSIFIER_MODEL_ENV = "CLASSIFIER_MODEL"


def find_project_root(start: Path) -> Path:
    for parent in [start, *start.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
    raise RuntimeError("Unable to locate project root (pyproject.toml not found).")


def _default_env_path() -> Optional[Path]:
    try:
        return find_project_root(Path(__file__).resolve()) / ".env"
    except RuntimeError:
        return None


ENV_PATH = _default_env_path()


def load_env(path: Optional[Path] = None, *, required: bool = False) -> bool:
    """
    Load a dotenv file into the process environment.
    Returns False when the file is absent and not required.
    """

    env_path = path or ENV_PATH
    if env_path is None or not env_path.exists():
        if required:
            raise FileNotFoundError(f"Env file not found at {env_path}")
        return False

    loaded = load_dotenv(env_path)
    if not loaded and required:
        raise RuntimeError(f"Failed to load env file from {env_path}")
    return loaded


def require_env(*names: str, environ: Mapping[str, str] | None = None) -> str:
    source = os.environ if environ is None else environ
    for name in names:
        value = (source.get(name) or "").strip()
        if value:
            return value
    raise ConfigurationError(
        f"{' or '.join(names)} is not set. Please ensure it's configured.",
        details="The classifier needs a Gemini API key before it can send any request.",
    )


@dataclass(frozen=True)
class ClassifierSettings:
    """
    Explicit configuration handed to the classification service.
    """

    api_key: str
    model: str = DEFAULT_CLASSIFIER_MODEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClassifierSettings":
        source = os.environ if environ is None else environ
        api_key = require_env(API_KEY_ENV, GEMINI_API_KEY_ENV, environ=source)
        model = (source.get(CLASSIFIER_MODEL_ENV) or "").strip() or DEFAULT_CLASSIFIER_MODEL
        return cls(api_key=api_key, model=model)


if __name__ == "__main__":
    print(f"Env path: {ENV_PATH}")

    load_env()
    settings = ClassifierSettings.from_env()
    print(f"Classifier model: {settings.model}")
