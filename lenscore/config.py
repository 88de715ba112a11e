"""
LensCore Configuration Management
==================================

Centralized configuration for PassLens using Python dataclasses and
TOML-based persistence.

Configuration is kept separate from code: every tunable that is not part
of the fixed scoring model (log destinations, default attack model,
history window, output format) lives here. The scoring tables themselves
are constants in :mod:`passlens.analyzers.tables`.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "passlens.toml"

_ATTACK_MODEL_NAMES: frozenset[str] = frozenset({"online", "offline", "gpu"})
_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)
_REPORT_FORMATS: frozenset[str] = frozenset({"console", "json", "html"})


# ========================== Tool-Specific Config ===========================


@dataclass(frozen=False, slots=True)
class AnalyzerConfig:
    """Configuration for the PassLens analysis front end.

    These values shape how results are presented and which attacker
    model is selected when the caller does not pick one. They never alter
    the scoring model.
    """

    default_attack_model: str = "offline"
    history_size: int = 50
    mask_passwords: bool = True
    recommended_length: int = 12

    def __post_init__(self) -> None:
        model = str(self.default_attack_model).lower()
        if model not in _ATTACK_MODEL_NAMES:
            raise ValueError(
                f"Unknown default_attack_model {self.default_attack_model!r}; "
                f"expected one of {sorted(_ATTACK_MODEL_NAMES)}"
            )
        self.default_attack_model = model
        if not isinstance(self.history_size, int) or self.history_size < 1:
            raise ValueError("history_size must be a positive integer")


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, output locations and format."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    output_dir: str = "output"
    report_format: str = "html"
    debug: bool = False
    version: str = "1.0.0"

    def __post_init__(self) -> None:
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log_level {self.log_level!r}")
        self.log_level = level
        if self.report_format not in _REPORT_FORMATS:
            raise ValueError(f"Unknown report_format {self.report_format!r}")


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class LensConfig:
    """Master configuration aggregating global and analyzer settings.

    Usage:
        >>> config = LensConfig.load()                  # from default path
        >>> config = LensConfig.load("custom.toml")     # from custom path
        >>> print(config.passlens.default_attack_model)
        'offline'

    The TOML layout mirrors the dataclasses::

        [global]
        log_level = "DEBUG"

        [passlens]
        default_attack_model = "gpu"
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    passlens: AnalyzerConfig = field(default_factory=AnalyzerConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> LensConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``passlens.toml`` in the
        project root. Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`LensConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            ValueError: If a known key carries an invalid value.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            passlens=cls._build_section(AnalyzerConfig, raw.get("passlens", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> LensConfig:
    """Module-level convenience wrapper around :meth:`LensConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = LensConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
