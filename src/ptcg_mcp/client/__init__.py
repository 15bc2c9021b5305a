from .errors import UpstreamUnavailable
from .http import PtcgClient

__all__ = ["PtcgClient", "UpstreamUnavailable"]
