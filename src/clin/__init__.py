"""clin: resolve command-line input from arguments or a fallback stream.

Give it the arguments your program received.  If there are any, they are
used as-is; if not, the input comes from standard input (or any other
configured stream), split into tokens or passed through as bytes.
"""

from clin.core.models import Input, ScanResult
from clin.core.tokenizer import scan_delimited, scan_runes
from clin.exceptions import ClinError
from clin.resolve import default, resolve_args, resolve_stream
from clin.version import __version__

__all__: list[str] = [
    "ClinError",
    "Input",
    "ScanResult",
    "__version__",
    "default",
    "resolve_args",
    "resolve_stream",
    "scan_delimited",
    "scan_runes",
]
