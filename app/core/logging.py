import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure le logger racine (console). Appelé une fois par create_app().
    """
    logging.basicConfig(format=LOG_FORMAT, level=level.upper())
    logging.getLogger().setLevel(level.upper())
    # httpx logue chaque requête en INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
