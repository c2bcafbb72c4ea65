# To re-export here.
from .errors import *
from .registry import KnownCapabilities, EDGE_CAPABILITIES
from .mobile import MobileEmulationDeviceSettings
from .perflog import PerformanceLoggingPreferences
from .capabilities import Dialect
from .options import *
from .config import *
from .builder import *
