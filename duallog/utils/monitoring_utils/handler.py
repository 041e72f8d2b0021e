import logging
from duallog.logger import Logger

SUCCESS_LEVEL = 25
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")


class DualSinkHandler(logging.Handler):
    """
    Routes standard `logging` records into a duallog Logger.
    DEBUG/INFO -> message, SUCCESS -> success, WARNING -> warning, ERROR and above -> error.
    """

    def __init__(self, dual_logger: Logger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.dual_logger = dual_logger
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if record.levelno >= logging.ERROR:
                self.dual_logger.log_error(message)
            elif record.levelno >= logging.WARNING:
                self.dual_logger.log_warning(message)
            elif record.levelno >= SUCCESS_LEVEL:
                self.dual_logger.log_success(message)
            else:
                self.dual_logger.log_message(message)
        except Exception:
            self.handleError(record)
