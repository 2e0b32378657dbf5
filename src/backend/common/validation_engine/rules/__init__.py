from . import dpm_business, dpm_technical, lei_euid, technical
from ..models import ValidationCategory

# Category -> module providing ``build_rules``; order follows ValidationCategory.
RULE_MODULES = {
    ValidationCategory.TECHNICAL: technical,
    ValidationCategory.DPM_TECHNICAL: dpm_technical,
    ValidationCategory.DPM_BUSINESS: dpm_business,
    ValidationCategory.LEI_EUID: lei_euid,
}

__all__ = [
    "RULE_MODULES",
    "dpm_business",
    "dpm_technical",
    "lei_euid",
    "technical",
]
