"""aotprobe: startup timeline breakdown for launcher and AOT cache diagnostics."""

import time

__version__ = "0.1.0"

# Recorded once, when the package is first imported
IMPORTED_AT_MS = time.time_ns() // 1_000_000
