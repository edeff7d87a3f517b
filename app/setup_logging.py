import logging, sys

HANDLER_NAME = "card-scanner"
# Client libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "openai", "multipart")

def setup_logging(level: str = "INFO"):
    """Root logger to stdout. Calling it again only updates the level."""
    root = logging.getLogger()
    lvl = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(lvl)
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        h = logging.StreamHandler(sys.stdout)
        h.set_name(HANDLER_NAME)
        h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s :: %(message)s"))
        root.addHandler(h)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))
