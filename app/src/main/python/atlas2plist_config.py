# Module: shared constants for the atlas -> plist converter.
# Example: import atlas2plist_config as config; config.PLIST_EXTENSION

# ---- File naming ----
ATLAS_EXTENSION = ".atlas"
IMAGE_EXTENSION = ".png"
PLIST_EXTENSION = ".plist"
TEXT_ENCODING = "utf-8"

# ---- Plist metadata ----
PLIST_FORMAT_VERSION = 3
# Placeholder kept so TexturePacker-aware consumers accept the file.
SMART_UPDATE_SIGNATURE = (
    "$TexturePacker:SmartUpdate:"
    "1b5bccb0d946cdece259a442890522fa:"
    "d1f71fbb82ab986541e20c2fd9691d45:"
    "9a3d8c457b352bd8184ece2e6957f9ca$"
)

# ---- Progress display ----
PROGRESS_DESCRIPTION = "Converting atlases"
