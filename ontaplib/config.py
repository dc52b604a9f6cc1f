# ontaplib/config.py
import os
from typing import Dict, Mapping, Optional

DEFAULT_CONFIG = {
    "scheme": "https",
    "api_root": "api",
    "timeout": 30,
    "validate_certs": True,
    "username": None,
    "password": None,
}

_TRUE_VALUES = ("1", "true", "yes", "on")


def build_config(overrides: Optional[Dict] = None) -> Dict:
    """Merge overrides onto the defaults, rejecting keys we do not know"""
    overrides = overrides or {}
    unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return {**DEFAULT_CONFIG, **overrides}


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict:
    """
    Read connection settings from ONTAP_* environment variables.
    Returns the merged config plus a 'hostname' entry.
    """
    environ = os.environ if environ is None else environ

    hostname = environ.get("ONTAP_HOSTNAME")
    if not hostname:
        raise ValueError("ONTAP_HOSTNAME is not set")

    overrides = {}
    if "ONTAP_USERNAME" in environ:
        overrides["username"] = environ["ONTAP_USERNAME"]
    if "ONTAP_PASSWORD" in environ:
        overrides["password"] = environ["ONTAP_PASSWORD"]
    if "ONTAP_VALIDATE_CERTS" in environ:
        overrides["validate_certs"] = environ["ONTAP_VALIDATE_CERTS"].strip().lower() in _TRUE_VALUES
    if "ONTAP_TIMEOUT" in environ:
        try:
            overrides["timeout"] = int(environ["ONTAP_TIMEOUT"])
        except ValueError:
            raise ValueError(f"ONTAP_TIMEOUT must be an integer, got {environ['ONTAP_TIMEOUT']!r}")

    config = build_config(overrides)
    config["hostname"] = hostname
    return config
