"""
Scan configuration for jsscan.

A ScanConfig is built once (by the CLI or a caller) and passed down to the
scanner and pipeline. It is frozen, so one instance can be shared between
scans safely.

Usage:
    from jsscan.config import ScanConfig

    config = ScanConfig(check_semicolons=True)
    report = scan_source("let x = 5", config=config)

    # Or from a plain mapping, e.g. loaded from a settings file
    config = ScanConfig.from_dict({"max_token_length": 64})
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

DEFAULT_REPORT_PATH = "stats.json"


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        check_semicolons: Warn when a statement line ends without ';'
        max_token_length: Truncate token display text to this many characters
        report_path: Where the JSON report is written
        emit_trace: Write the [KIND] text trace to stdout

    """

    check_semicolons: bool = False
    max_token_length: Optional[int] = None
    report_path: str = DEFAULT_REPORT_PATH
    emit_trace: bool = True

    def __post_init__(self):
        if self.max_token_length is not None:
            if isinstance(self.max_token_length, bool) or not isinstance(self.max_token_length, int):
                raise ValueError("max_token_length must be an integer")
            if self.max_token_length < 1:
                raise ValueError("max_token_length must be positive")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Unknown keys are ignored so that a larger settings mapping can be
        passed in directly.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})

    def truncate(self, text: str) -> str:
        """Apply the maximum-token-length policy to display text."""
        if self.max_token_length is None:
            return text
        return text[:self.max_token_length]
