"""
Warehouse Configuration
=======================
Process-wide defaults, overridable through environment variables.

Other modules read these as ``config.NAME`` at call time rather than
importing the values, so a test can patch them on this module.
"""

import os


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ─── Registry ──────────────────────────────────────────────────────────────

# Name used by get_warehouse() when the caller gives none.
DEFAULT_WAREHOUSE_NAME = os.getenv("WAREHOUSE_DEFAULT_NAME", "default")

# ─── Validation ────────────────────────────────────────────────────────────

# Off: add_product / update_product_price accept blank names and negative
# prices unvalidated. On: both are rejected with InvalidProductError.
# Sampled once per warehouse, when the registry creates it.
STRICT_VALIDATION = _env_flag("WAREHOUSE_STRICT_VALIDATION")
