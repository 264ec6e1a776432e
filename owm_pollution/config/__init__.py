import os, re, yaml, logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from dotenv import load_dotenv

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml"


TEXT_KEYS = ("key", "token", "secret", "password")


def _is_text_key(key: Any) -> bool:
    return isinstance(key, str) and key.lower().endswith(TEXT_KEYS)


def _expand_env(text: str) -> str:
    for name in re.findall(r"\$\{([^}]+)\}", text):
        env = os.getenv(name)
        if env is None:
            log.warning("Environment variable %s not set", name)
            continue
        text = text.replace(f"${{{name}}}", env)
    return text


def _sub_env(val: Any, key: Any = None) -> Any:
    """Resolve ${VAR} placeholders; numeric text becomes a number except under credential keys."""
    if isinstance(val, dict):
        return {k: _sub_env(v, k) for k, v in val.items()}
    if isinstance(val, list):
        return [_sub_env(v, key) for v in val]
    if isinstance(val, str):
        val = _expand_env(val)
        if _is_text_key(key):
            return val
        try:
            if val.replace(".", "", 1).lstrip("-").isdigit():
                return float(val) if "." in val else int(val)
        except ValueError:
            pass
    return val


def _placeholders(obj: Any) -> Iterator[str]:
    if isinstance(obj, dict):
        obj = list(obj.values())
    if isinstance(obj, list):
        for item in obj:
            yield from _placeholders(item)
    elif isinstance(obj, str):
        yield from re.findall(r"\$\{([^}]+)\}", obj)


def load_config(path: Optional[str | Path] = None, env_file: Optional[str | Path] = None) -> Dict[str, Any]:
    """Load YAML config and substitute ${VAR} from .env or process env.

    `path` defaults to the config.yaml shipped with the package. `env_file`
    defaults to a .env in the current working directory; a missing file is
    not an error.
    """
    env_path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        log.info("Loaded environment from %s", env_path)
    else:
        log.debug(".env not found at %s; using process environment only", env_path)

    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")

    with open(cfg_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    missing = sorted({v for v in _placeholders(raw) if v not in os.environ})
    if missing:
        log.warning("Missing environment variables: %s", ", ".join(missing))

    return _sub_env(raw)


def get_api_key() -> Optional[str]:
    val = os.getenv("OPENWEATHER_API_KEY")
    if val and val.strip():
        return val.strip()
    return None
