"""Audit configuration: salary band multipliers and reporting-line limits."""

import tomllib
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from pathlib import Path

import yaml

from orgaudit.errors import InvalidInputError

type ConfigDict = dict[str, str | int | float]

DEFAULT_CONFIG_FILE = Path("orgaudit.yaml")


@dataclass(frozen=True)
class AuditConfig:
    min_salary_multiplier: Decimal = Decimal("1.20")
    max_salary_multiplier: Decimal = Decimal("1.50")
    max_reporting_line: int = 4
    average_precision: Decimal = Decimal("0.01")


DEFAULT_CONFIG = AuditConfig()


def load_audit_config(profile: str = "default") -> AuditConfig:
    match profile:
        case "default":
            return DEFAULT_CONFIG
        case "strict":
            return replace(
                DEFAULT_CONFIG,
                min_salary_multiplier=Decimal("1.25"),
                max_salary_multiplier=Decimal("1.40"),
                max_reporting_line=3,
            )
        case "lenient":
            return replace(
                DEFAULT_CONFIG,
                min_salary_multiplier=Decimal("1.10"),
                max_salary_multiplier=Decimal("1.75"),
                max_reporting_line=6,
            )
        case other:
            raise InvalidInputError(f"Unknown audit profile: {other}")


def _to_decimal(key: str, value: str | int | float) -> Decimal:
    # str() keeps YAML floats like 1.2 from turning into binary noise
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise InvalidInputError(f"Config value '{key}' is not a number: {value!r}") from None
    if not result.is_finite() or result <= 0:
        raise InvalidInputError(f"Config value '{key}' must be a positive number: {value!r}")
    return result


def apply_overrides(base: AuditConfig, overrides: ConfigDict) -> AuditConfig:
    """Return ``base`` with the given keys replaced, validating every value."""
    config = base
    for key, value in overrides.items():
        match key:
            case "profile":
                continue
            case "min_salary_multiplier" | "max_salary_multiplier" | "average_precision":
                config = replace(config, **{key: _to_decimal(key, value)})
            case "max_reporting_line":
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise InvalidInputError(
                        f"Config value 'max_reporting_line' must be a non-negative integer: {value!r}"
                    )
                config = replace(config, max_reporting_line=value)
            case unknown:
                raise InvalidInputError(f"Unknown config key: {unknown}")

    if config.min_salary_multiplier > config.max_salary_multiplier:
        raise InvalidInputError(
            "min_salary_multiplier cannot exceed max_salary_multiplier "
            f"({config.min_salary_multiplier} > {config.max_salary_multiplier})"
        )
    return config


def _from_mapping(data: dict | None, source: Path) -> AuditConfig:
    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise InvalidInputError(f"Config in {source} must be a mapping")
    base = load_audit_config(str(data.get("profile", "default")))
    return apply_overrides(base, data)


def read_config_file(path: Path) -> AuditConfig:
    """Load an ``AuditConfig`` from a YAML file or a pyproject ``[tool.orgaudit]`` table."""
    path = Path(path)
    match path.suffix:
        case ".yaml" | ".yml":
            with open(path) as f:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as exc:
                    raise InvalidInputError(f"Invalid YAML in {path}: {exc}") from exc
            return _from_mapping(data, path)
        case ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
            return _from_mapping(data.get("tool", {}).get("orgaudit"), path)
        case ext:
            raise InvalidInputError(f"Unsupported config format: {ext}")


def resolve_config(path: Path | None = None) -> AuditConfig:
    """Use ``path`` when given, else ``orgaudit.yaml`` in the working directory, else defaults."""
    if path is not None:
        return read_config_file(path)
    if DEFAULT_CONFIG_FILE.exists():
        return read_config_file(DEFAULT_CONFIG_FILE)
    return DEFAULT_CONFIG
