"""
Fixed business values for the generation gate.
"""

# ── Payment rules ───────────────────────────────────────────────────
REQUIRED_ORDER_STATUS = "COMPLETED"
REQUIRED_AMOUNT_VALUE = "3.00"
REQUIRED_CURRENCY_CODE = "USD"

# ── Mock generation result ──────────────────────────────────────────
TASK_ID_PREFIX = "mock_task_"
MOCK_AUDIO_URLS = (
    "https://www.soundhelix.com/examples/mp3/SoundHelix-Song-1.mp3",
    "https://www.soundhelix.com/examples/mp3/SoundHelix-Song-2.mp3",
)

# ── Service identity ────────────────────────────────────────────────
SERVICE_NAME = "Melody Magic"
LIVENESS_TEXT = "Melody Magic Server OK ✅"
HEALTH_MESSAGE = "Melody Magic server running"
