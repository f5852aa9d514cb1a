import uuid
from typing import Callable, Optional

from chem_inventory.core.config import settings


def generate_chemical_id(exists: Callable[[str], bool], prefix: Optional[str] = None) -> str:
    """
    Generate an id such as ``CHEM3F9A01BC`` that is not yet in use.

    `exists` is asked about every candidate; a taken id is simply redrawn.
    """
    prefix = settings.id_prefix if prefix is None else prefix
    while True:
        candidate = f"{prefix}{uuid.uuid4().hex[:8].upper()}"
        if not exists(candidate):
            return candidate
