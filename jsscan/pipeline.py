"""
The scan pipeline: Scanner -> trace sink -> Reporter.

One forward pass. After each token the sink receives the token and then any
warnings that classifying it produced, so the trace reads in source order.
Unused-variable warnings follow once the stream is exhausted.

Author: xwest
"""

from typing import Optional

from .config import ScanConfig
from .lexer.scanner import Scanner
from .lexer.source import read_source
from .report.reporter import Reporter, ScanReport
from .report.trace import TraceSink, NullSink
from .state import ScanState
from .utils.logger import get_logger

logger = get_logger(__name__)


def scan_source(
    source: str,
    filename: str = "<string>",
    config: Optional[ScanConfig] = None,
    sink: Optional[TraceSink] = None
) -> ScanReport:
    """
    Scan source text and build its report.

    Args:
        source: Source code string
        filename: Filename for locations
        config: Scan options
        sink: Trace destination; defaults to stdout unless config.emit_trace is off

    Returns:
        The finished ScanReport
    """
    config = config if config is not None else ScanConfig()
    if sink is None:
        sink = TraceSink() if config.emit_trace else NullSink()

    state = ScanState(filename=filename)
    scanner = Scanner(source, filename, state, config)

    emitted = 0
    for token in scanner:
        sink.token(token)
        for warning in state.warnings[emitted:]:
            sink.warning(warning)
        emitted = len(state.warnings)

    reporter = Reporter(state)
    for warning in reporter.finalize():
        sink.warning(warning)

    report = reporter.build()
    logger.debug("scanned %s: %d lines, %d symbols, %d warnings",
                 filename, report.total_lines, len(report.variables), len(report.warnings))
    return report


def scan_file(path: str, config: Optional[ScanConfig] = None,
              sink: Optional[TraceSink] = None) -> ScanReport:
    """
    Scan a file and build its report.

    Raises:
        SourceReadError: If the file cannot be read
    """
    return scan_source(read_source(path), path, config, sink)
