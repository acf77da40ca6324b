#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..core.errors import ConfigurationError
from ..qr.codec import QrConfig
from .installer import resolve_config_path

DEFAULT_TEACHER = "Rick"
DEFAULT_ROWS = 32
DEFAULT_MAILING_ROWS = 4
_QR_ERROR_LEVELS = ("L", "M", "Q", "H")


@dataclass(frozen=True)
class GenerateDefaults:
    teacher: str = DEFAULT_TEACHER
    rows: int = DEFAULT_ROWS
    mailing_list: bool = True
    mailing_rows: int = DEFAULT_MAILING_ROWS
    location: str = ""
    output_dir: str | None = None


@dataclass(frozen=True)
class AppConfig:
    path: Path
    defaults: GenerateDefaults = field(default_factory=GenerateDefaults)
    qr_config: QrConfig = field(default_factory=QrConfig)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return AppConfig(
        path=config_path,
        defaults=_parse_generate_defaults(_get_dict(data, "defaults")),
        qr_config=build_qr_config(_get_dict(data, "qr")),
    )


def build_qr_config(cfg: dict[str, object] | None = None) -> QrConfig:
    cfg = cfg or {}
    return QrConfig(
        error=_parse_error_level(cfg.get("error"), field="qr.error"),
        scale=_parse_positive_int(cfg.get("scale"), field="qr.scale", default=4),
        border=_parse_non_negative_int(cfg.get("border"), field="qr.border", default=4),
        boost_error=_parse_bool(cfg.get("boost_error"), field="qr.boost_error", default=True),
    )


def _parse_generate_defaults(cfg: dict[str, object]) -> GenerateDefaults:
    return GenerateDefaults(
        teacher=_parse_str(cfg.get("teacher"), field="defaults.teacher", default=DEFAULT_TEACHER),
        rows=_parse_positive_int(cfg.get("rows"), field="defaults.rows", default=DEFAULT_ROWS),
        mailing_list=_parse_bool(
            cfg.get("mailing_list"),
            field="defaults.mailing_list",
            default=True,
        ),
        mailing_rows=_parse_positive_int(
            cfg.get("mailing_rows"),
            field="defaults.mailing_rows",
            default=DEFAULT_MAILING_ROWS,
        ),
        location=_parse_str(cfg.get("location"), field="defaults.location", default=""),
        output_dir=_parse_optional_unset_str(cfg.get("output_dir"), field="defaults.output_dir"),
    )


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"config file not found: {path}") from exc
    except OSError as exc:
        raise ConfigurationError(f"cannot read config file {path}: {exc.strerror or exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"invalid TOML in {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_str(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigurationError(f"{field} must be a string")
    return value.strip()


def _parse_optional_unset_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ConfigurationError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ConfigurationError(f"{field} must be a boolean")


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigurationError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError as exc:
            raise ConfigurationError(f"{field} must be an integer") from exc
    raise ConfigurationError(f"{field} must be an integer")


def _parse_positive_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ConfigurationError(f"{field} must be a positive integer")
    return parsed


def _parse_non_negative_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed < 0:
        raise ConfigurationError(f"{field} must be zero or a positive integer")
    return parsed


def _parse_error_level(value: object, *, field: str) -> str:
    if value is None:
        return "M"
    if not isinstance(value, str) or value.strip().upper() not in _QR_ERROR_LEVELS:
        raise ConfigurationError(f"{field} must be one of {', '.join(_QR_ERROR_LEVELS)}")
    return value.strip().upper()
