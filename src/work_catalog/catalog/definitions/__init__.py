"""Work definitions package.

Auto-imports and registers every work definition. Import order is the
catalogue order shown on the listing page.
"""

# Import all work definitions to trigger auto-registration
from . import corevia_financial_platform  # noqa: F401
from . import landscapo_architecture_platform  # noqa: F401
from . import stayli_vacation_rental_platform  # noqa: F401
from . import elev8_rwanda_website  # noqa: F401
from . import elev8_moments_event_design  # noqa: F401

__all__ = [
    "corevia_financial_platform",
    "landscapo_architecture_platform",
    "stayli_vacation_rental_platform",
    "elev8_rwanda_website",
    "elev8_moments_event_design",
]
