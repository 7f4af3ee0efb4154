import datetime
import logging
import sys

def configure_standard_logger(log_dir=None, level=logging.INFO):
    ''' Sends reads_map log messages to stderr and, if log_dir is given, to a
    timestamped file in log_dir. Returns the logger and the file handler
    (None if no file is being written).
    '''
    logger = logging.getLogger('reads_map')
    logger.propagate = False
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt='%(asctime)s: %(message)s',
                                  datefmt='%y-%m-%d %H:%M:%S',
                                 )

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(level)
    logger.addHandler(stream_handler)

    file_handler = None

    if log_dir is not None:
        log_dir.mkdir(exist_ok=True, parents=True)
        log_fn = log_dir / f'log_{datetime.datetime.now():%y%m%d-%H%M%S}.out'

        file_handler = logging.FileHandler(log_fn)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

        print(f'Logging in {log_fn}')

    return logger, file_handler
