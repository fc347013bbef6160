"""Console entrypoint: ``appdeck`` and ``python -m appdeck``."""
from __future__ import annotations

import os
import sys
from typing import Optional, Sequence


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    if "--headless" in args:
        # Must be set before app is imported; load_config runs at import time.
        os.environ["APPDECK_HEADLESS"] = "1"
    import app

    app.launch()


if __name__ == "__main__":
    main()
