import logging

_FORMAT = "%(asctime)s %(levelname)-5s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single console handler on the root logger."""
    logging.basicConfig(level=level.upper(), format=_FORMAT, force=True)
