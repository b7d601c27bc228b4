"""Import classes and definitions used for input/output, logging, and configuration."""

from .logging import DiagnosticSink as DiagnosticSink
from .logging import LoggingDiagnostics as LoggingDiagnostics
from .logging import console as console
from .logging import log_info as log_info
from .logging import log_warning as log_warning
