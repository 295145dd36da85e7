"""Constants for elegoo_centauri."""

DOMAIN = "elegoo_centauri"
MANUFACTURER = "Elegoo"
DEFAULT_MODEL = "Centauri Carbon"

DATA_HUB = "hub"
DATA_COORDINATOR = "coordinator"

CONF_POLL_INTERVAL = "poll_interval"
CONF_RECONNECT_DELAY = "reconnect_delay"
CONF_KEEPALIVE = "keepalive"
CONF_MAINBOARD_ID = "mainboard_id"

DEFAULT_POLL_INTERVAL = 10
DEFAULT_RECONNECT_DELAY = 60
DEFAULT_KEEPALIVE = True
DISCOVERY_TIMEOUT = 2.0
