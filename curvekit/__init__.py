from . import easing, helpers, make
from .easing import EASING_FUNCTIONS, get_easing

__version__ = "0.1.0"
