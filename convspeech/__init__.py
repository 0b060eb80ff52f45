from .config import CallConfig, Config
from .domain import SpeakingTurn, Turn
from .multiend_call import MultiEndCall, build_multiend_call
from .reader_cache import resolve_audiotrack_readers
from .timing import TimingFileError, load_timing, save_timing
