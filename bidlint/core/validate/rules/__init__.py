"""Category validators, one module per bid request object."""

from .advanced import validate_advanced
from .app import cross_validate_store_bundle, validate_app
from .banner import validate_banner
from .base import RuleSet, run_rule_sets
from .ctv import validate_ctv
from .device import validate_device
from .dooh import validate_dooh
from .impression import validate_impressions
from .native import validate_native
from .regs import validate_regs
from .request import validate_request
from .site import validate_site
from .source import validate_source
from .user import validate_user
from .video import validate_video

__all__ = [
    "RuleSet",
    "cross_validate_store_bundle",
    "run_rule_sets",
    "validate_advanced",
    "validate_app",
    "validate_banner",
    "validate_ctv",
    "validate_device",
    "validate_dooh",
    "validate_impressions",
    "validate_native",
    "validate_regs",
    "validate_request",
    "validate_site",
    "validate_source",
    "validate_user",
    "validate_video",
]
