# logger_conf.py
import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_FILE = os.getenv(
    "MOVIE_FINDER_LOG_FILE",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "movie_finder.log"),
)
CONSOLE_LEVEL = os.getenv("MOVIE_FINDER_LOG_LEVEL", "INFO").upper()


def get_logger(name: str = "movie-finder"):
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    # console handler (nível configurável, INFO por padrão)
    ch = logging.StreamHandler()
    ch.setLevel(getattr(logging, CONSOLE_LEVEL, logging.INFO))
    ch_formatter = logging.Formatter("%(levelname)s - %(message)s")
    ch.setFormatter(ch_formatter)
    logger.addHandler(ch)

    # file handler (debug): URLs, payloads e exceções ficam só aqui
    fh = logging.FileHandler(LOG_FILE, encoding="utf-8", delay=True)
    fh.setLevel(logging.DEBUG)
    fh_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    fh.setFormatter(fh_formatter)
    logger.addHandler(fh)

    return logger
