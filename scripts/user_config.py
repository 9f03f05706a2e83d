"""sdfgen User Configuration.

This is the user-facing configuration file. Modify settings here to customize
the pipeline behavior. Expert defaults live in src/sdfgen/schemas/param.py

Usage:
    sdfgen --config scripts/user_config.py prepare-bitmap terrain.png mask.png "#2e8b57"
    sdfgen --config scripts/user_config.py generate-sdf mask.png land.sdf
    sdfgen --config scripts/user_config.py sdf-to-png land.sdf preview.png
"""

CONFIG = {
    # ========================================================================
    # MASK EXTRACTION
    # ========================================================================
    "TOLERANCE": 0.005,           # Per-channel match tolerance (fraction of full range)

    # ========================================================================
    # DISTANCE FIELD
    # ========================================================================
    "UNBOUNDED_POLICY": "sentinel",  # "sentinel" or "reject" for masks with no boundary
    "BYTE_ORDER": "big",          # Serialized field byte order: "big" or "little"
    "MAX_IMAGE_PIXELS": None,     # Reject larger input images (None = no limit)

    # ========================================================================
    # PREVIEW
    # ========================================================================
    "BIT_DEPTH": 16,              # Preview channel depth: 8 or 16

    # ========================================================================
    # LOGGING
    # ========================================================================
    "LOG_LEVEL": "INFO",
    "LOG_FILE": None,
}
