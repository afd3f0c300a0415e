# Input files, one entry per line
KEYS_FILE = "privateKeys.txt"
RECIPIENTS_FILE = "targetaddress.txt"

# Retry policy for RPC calls (fixed delay, seconds)
MAX_RETRIES = 5
RETRY_DELAY = 5

# Wait between sending a tx and polling for its receipt (seconds)
SETTLE_DELAY = 15

NATIVE_GAS_LIMIT = 21000
TOKEN_GAS_MULTIPLIER = 1.2

# many-to-one only checks that each sender can afford a single tx.
# Set to True to require amount * tx_count like one-to-many does.
MANY_TO_ONE_FULL_BATCH_CHECK = False

LOG_LEVEL = "INFO"
