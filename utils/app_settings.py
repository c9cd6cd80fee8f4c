"""Application settings switches for the clinic dashboard.

Each switch is True/False and resolves, in order, from an environment variable
or the ``[clinic]`` section of ``data/app.ini``.  The data directory itself can
be moved with ``CLINICFLOW_DATA_DIR``.

Example ``app.ini``::

    [clinic]
    dev = true
    strict_references = false
    seed = true
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class StoreSettings:
    """Resolved switches consumed by ``main.py`` when building the store."""

    dev_mode: bool = False
    strict_references: bool = False
    seed_sample_data: bool = True


def data_dir() -> Path:
    return Path(os.environ.get("CLINICFLOW_DATA_DIR", "data"))


def _read_ini(ini_path: Path) -> configparser.ConfigParser | None:
    if not ini_path.exists():
        return None
    cp = configparser.ConfigParser()
    try:
        cp.read(ini_path)
    except configparser.Error as exc:
        logger.warning("[settings] ignoring unreadable %s: %s", ini_path, exc)
        return None
    return cp


def _parse_flag(raw: str | None) -> Optional[bool]:
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return None


def _flag(
    env_var: str,
    ini_key: str,
    default: bool,
    ini: configparser.ConfigParser | None,
) -> bool:
    from_env = _parse_flag(os.environ.get(env_var))
    if from_env is not None:
        return from_env
    if ini is not None:
        from_ini = _parse_flag(ini.get("clinic", ini_key, fallback=None))
        if from_ini is not None:
            return from_ini
    return default


def load_settings(ini_path: Path | None = None) -> StoreSettings:
    """Resolve the current switches from the environment and ``app.ini``."""

    ini = _read_ini(ini_path if ini_path is not None else data_dir() / "app.ini")
    settings = StoreSettings(
        dev_mode=_flag("CLINICFLOW_DEV", "dev", False, ini),
        strict_references=_flag(
            "CLINICFLOW_STRICT_REFERENCES", "strict_references", False, ini
        ),
        seed_sample_data=_flag("CLINICFLOW_SEED", "seed", True, ini),
    )
    logger.debug("[settings] resolved %s", settings)
    return settings


__all__ = ["StoreSettings", "data_dir", "load_settings"]
