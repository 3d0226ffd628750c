"""
Runner configuration module for build, test and debugger settings.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional


@dataclass
class BuildConfig:
    """Settings for the ``dotnet build`` step."""
    args: List[str] = field(default_factory=list)


@dataclass
class DotnetTestConfig:
    """Settings for the ``dotnet test`` step."""
    args: List[str] = field(default_factory=list)


@dataclass
class DapConfig:
    """Settings for attaching a debugger to the test host."""
    type: str = "coreclr"


_SECTIONS = {
    "build": BuildConfig,
    "test": DotnetTestConfig,
    "dap": DapConfig,
}


@dataclass
class RunnerConfig:
    """Configuration passed explicitly to every run operation."""

    # Notices below this level are not shown
    log_level: int = logging.WARNING
    # Directories to climb from the source file when looking for a .sln/.csproj
    find_target_max_iter: int = 10
    build: BuildConfig = field(default_factory=BuildConfig)
    test: DotnetTestConfig = field(default_factory=DotnetTestConfig)
    dap: DapConfig = field(default_factory=DapConfig)
    # Used by run_target when no target is given
    default_target: Optional[str] = None

    def setup(self, opts: Optional[Dict[str, Any]] = None) -> "RunnerConfig":
        """
        Return a copy with the given top-level options replaced.

        Sections (``build``, ``test``, ``dap``) are replaced as a whole and may
        be given as dicts.

        Raises:
            ValueError: If an option name is unknown
        """
        opts = dict(opts or {})
        known = {f.name for f in fields(self)}
        unknown = sorted(set(opts) - known)
        if unknown:
            raise ValueError(f"Unknown configuration options: {', '.join(unknown)}")

        for name, section_cls in _SECTIONS.items():
            if isinstance(opts.get(name), dict):
                opts[name] = section_cls(**opts[name])
        if isinstance(opts.get("log_level"), str):
            opts["log_level"] = logging.getLevelName(opts["log_level"].upper())
        return replace(self, **opts)

    def validate(self) -> List[str]:
        """Validate configuration settings and return list of errors."""
        errors = []

        if not isinstance(self.log_level, int):
            errors.append(f"Unknown log level: {self.log_level!r}")

        if self.find_target_max_iter < 1:
            errors.append("find_target_max_iter must be at least 1")

        if not self.dap.type:
            errors.append("A debugger adapter type is required")

        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0
