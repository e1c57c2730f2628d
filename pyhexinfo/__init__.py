"""Read, validate and summarize Intel HEX object files.

``loader.parse_hex`` runs the whole pipeline: each line is decoded by
``codec``, address records update ``layout.AddressState`` and data records are
merged into ``layout.ChunkAccumulator``. ``report`` renders the resulting
``HexSummary`` for the command-line front end in ``run.py``.
"""

from __future__ import annotations

from . import codec, layout, loader, report, ui, utils

__version__ = "0.1.0"

__all__: list[str] = [
    "codec",
    "layout",
    "loader",
    "report",
    "ui",
    "utils",
]
