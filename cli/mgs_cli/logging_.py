from __future__ import annotations

import logging


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # http and signing libraries are chatty at DEBUG; keep them quiet unless -v
    for name in ("httpx", "httpcore", "botocore"):
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
