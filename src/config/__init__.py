import os, re, yaml, logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .map_config import MapConfig, MapMissing, MapReady, load_map_config

log = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[2]


# values that must stay strings even when they look numeric
STRING_KEYS = {"api_key", "map_id"}


def _sub_env(val: Any, key: Optional[str] = None) -> Any:
    if isinstance(val, dict):
        return {k: _sub_env(v, k) for k, v in val.items()}
    if isinstance(val, list):
        return [_sub_env(v, key) for v in val]
    if isinstance(val, str):
        for name in re.findall(r"\$\{([^}]+)\}", val):
            env = os.getenv(name)
            if env is None:
                log.warning("Environment variable %s not set", name)
                continue
            val = val.replace(f"${{{name}}}", env)
        if key in STRING_KEYS:
            return val
        try:
            if val.replace(".", "", 1).lstrip("-").isdigit():
                return float(val) if "." in val else int(val)
        except ValueError:
            pass
    return val


essential_env = [
    "MAPTILER_API_KEY",
    "MAPTILER_MAP_ID",
]


def load_config(rel_path: str = "config/config.yaml", root: Optional[Path] = None) -> Dict[str, Any]:
    """Load YAML config and substitute ${VAR} from .env or process env."""
    root = Path(root) if root is not None else REPO_ROOT

    env_path = root / ".env"
    if not env_path.exists():
        env_path = root.parent / ".env"

    if env_path.exists():
        load_dotenv(env_path)
        log.info("Loaded environment from %s", env_path)
    else:
        log.info(".env not found in project or parent; using process environment only")

    cfg_path = root / rel_path
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")

    with open(cfg_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    cfg = _sub_env(cfg)

    missing = [v for v in essential_env if v not in os.environ and _contains_placeholder(cfg, v)]
    if missing:
        log.warning("Missing environment variables: %s", ", ".join(missing))

    return cfg


def _contains_placeholder(obj: Any, var: str) -> bool:
    if isinstance(obj, dict):
        return any(_contains_placeholder(v, var) for v in obj.values())
    if isinstance(obj, list):
        return any(_contains_placeholder(v, var) for v in obj)
    if isinstance(obj, str):
        return f"${{{var}}}" in obj
    return False


__all__ = [
    "load_config",
    "load_map_config",
    "MapConfig",
    "MapReady",
    "MapMissing",
    "REPO_ROOT",
]
