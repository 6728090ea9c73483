from .logger import get_logger as get_logger
