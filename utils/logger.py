# DEPENDENCIES
import sys
import time
import json
import logging
import traceback
from typing import Any
from typing import Dict
from pathlib import Path
from typing import Optional
from functools import wraps
from datetime import datetime



class ContractAnalyzerLogger:
    """
    Logging for rental contract analysis
    Features:
    - Structured JSON log records
    - Separate files for errors and performance timings
    - Console output for warnings and above
    """
    _loggers  : Dict[str, logging.Logger] = dict()
    _log_dir  : Optional[Path]            = None
    _app_name : str                       = "contract_analyzer"

    # Log levels
    DEBUG                                 = logging.DEBUG
    INFO                                  = logging.INFO
    WARNING                               = logging.WARNING
    ERROR                                 = logging.ERROR
    CRITICAL                              = logging.CRITICAL


    @classmethod
    def setup(cls, log_dir: str = "logs", app_name: str = "contract_analyzer", level: int = logging.INFO):
        """
        Setup logging system

        Arguments:
        ----------
            log_dir  { str } : Directory for log files

            app_name { str } : Application name for log files

            level    { int } : Level of the main application logger
        """
        cls._app_name = app_name
        cls._log_dir  = Path(log_dir)
        cls._log_dir.mkdir(parents = True, exist_ok = True)

        # Main logger
        cls._create_logger(name     = app_name,
                           log_file = cls._log_dir / f"{app_name}.log",
                           level    = level,
                          )

        # Error logger
        cls._create_logger(name     = f"{app_name}.error",
                           log_file = cls._log_dir / f"{app_name}_error.log",
                           level    = logging.ERROR,
                          )

        # Performance logger
        cls._create_logger(name     = f"{app_name}.performance",
                           log_file = cls._log_dir / f"{app_name}_performance.log",
                           level    = logging.INFO,
                          )


    @classmethod
    def _create_logger(cls, name: str, log_file: Path, level: int) -> logging.Logger:
        """
        Create and configure a logger
        """
        logger             = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate   = False

        # Clear existing handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler       = logging.FileHandler(log_file, encoding = "utf-8")
        file_handler.setLevel(level)

        # Console handler (warnings and above)
        console_handler    = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)

        formatter          = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt = '%Y-%m-%d %H:%M:%S')
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        cls._loggers[name] = logger

        return logger


    @classmethod
    def get_logger(cls, name: Optional[str] = None) -> logging.Logger:
        """
        Get logger by name (defaults to the main application logger)
        """
        name = name or cls._app_name

        if not cls._loggers:
            # Lazy initialization
            cls.setup(app_name = cls._app_name)

        return cls._loggers.get(name, logging.getLogger(name))


    @classmethod
    def _get_child_logger(cls, suffix: str) -> logging.Logger:
        return cls._loggers.get(f"{cls._app_name}.{suffix}") or cls.get_logger()


    @classmethod
    def log_structured(cls, level: int, message: str, **kwargs):
        """
        Log structured data as JSON

        Arguments:
        ----------
            level      { int } : Log level

            message    { str } : Log message

            **kwargs           : Additional structured data
        """
        logger = cls.get_logger()

        if not logger.isEnabledFor(level):
            return

        log_data = {"timestamp" : datetime.now().isoformat(),
                    "message"   : message,
                    **kwargs
                   }

        logger.log(level, json.dumps(log_data, default = str))


    @classmethod
    def log_error(cls, error: Any, context: Dict[str, Any] = None):
        """
        Log error with full traceback and context

        Arguments:
        ----------
            error   { Exception } : Exception object (or a plain message)

            context   { dict }    : Additional context dictionary
        """
        error_logger = cls._get_child_logger("error")

        if isinstance(error, BaseException):
            error_data = {"timestamp"     : datetime.now().isoformat(),
                          "error_type"    : type(error).__name__,
                          "error_message" : str(error),
                          "traceback"     : "".join(traceback.format_exception(type(error), error, error.__traceback__)),
                          "context"       : context or {},
                         }

        else:
            error_data = {"timestamp"     : datetime.now().isoformat(),
                          "error_message" : str(error),
                          "context"       : context or {},
                         }

        error_logger.error(json.dumps(error_data, indent = 2, default = str))


    @classmethod
    def log_performance(cls, operation: str, duration: float, **metrics):
        """
        Log performance metrics

        Arguments:
        ----------
            operation  { str }  : Operation name

            duration  { float } : Duration in seconds

            **metrics           : Additional metrics
        """
        perf_logger = cls._get_child_logger("performance")

        perf_data   = {"timestamp"        : datetime.now().isoformat(),
                       "operation"        : operation,
                       "duration_seconds" : round(duration, 4),
                       **metrics
                      }

        perf_logger.info(json.dumps(perf_data, default = str))


    @staticmethod
    def log_execution_time(operation_name: str = None):
        """
        Decorator to log execution time of functions
        """
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                op_name    = operation_name or func.__name__
                start_time = time.perf_counter()

                try:
                    result   = func(*args, **kwargs)
                    duration = time.perf_counter() - start_time

                    ContractAnalyzerLogger.log_performance(operation = op_name,
                                                           duration  = duration,
                                                           status    = "success",
                                                          )

                    return result

                except Exception as e:
                    duration = time.perf_counter() - start_time

                    ContractAnalyzerLogger.log_performance(operation = op_name,
                                                           duration  = duration,
                                                           status    = "error",
                                                           error     = str(e),
                                                          )

                    ContractAnalyzerLogger.log_error(e, context = {"operation" : op_name})
                    raise

            return wrapper

        return decorator



# Convenience functions
def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get logger instance
    """
    return ContractAnalyzerLogger.get_logger(name)


def log_info(message: str, **kwargs):
    """
    Log info message
    """
    ContractAnalyzerLogger.log_structured(logging.INFO, message, **kwargs)


def log_warning(message: str, **kwargs):
    """
    Log warning message
    """
    ContractAnalyzerLogger.log_structured(logging.WARNING, message, **kwargs)


def log_error(error: Any, context: Dict[str, Any] = None):
    """
    Log error with context
    """
    ContractAnalyzerLogger.log_error(error, context)


def log_debug(message: str, **kwargs):
    """
    Log debug message
    """
    ContractAnalyzerLogger.log_structured(logging.DEBUG, message, **kwargs)
