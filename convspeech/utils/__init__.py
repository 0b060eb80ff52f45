from .logger import configure_logging, get_logger
from .cross_talk import find_cross_talk_violation
