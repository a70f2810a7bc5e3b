"""Process-wide logging setup."""
import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Install one stderr handler on the root logger. Safe to call more than once."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for h in list(root.handlers):
        if getattr(h, "_tracker_handler", False):
            root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler._tracker_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    # uvicorn access log duplicates the request middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
