import os
import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name, log_dir=None):
    """
    Return a named INFO logger writing to the console and, when a log
    directory is given, to <log_dir>/<name>.log.

    The console handler is attached once per logger name. A file handler
    is attached once per log file, so a logger first used without a log
    directory still picks one up later.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    if log_dir:
        path = os.path.abspath(os.path.join(log_dir, f"{name}.log"))
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == path
                   for h in logger.handlers):
            if not os.path.exists(log_dir):
                os.makedirs(log_dir)
            fh = logging.FileHandler(path)
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formatter)
            logger.addHandler(fh)

    return logger
