import os
import time

DIGEST_DIR = "digest"
START_TIME = time.time()
START_TIME_INT = int(START_TIME)
LOGS_PATH = f"{DIGEST_DIR}/{START_TIME_INT}/logs.txt"
DEFAULT_MANIFEST_PATH = "manifest.yaml"
DEFAULT_ENV_PATH = os.path.join(os.path.expanduser("~"), ".env")
DEFAULT_DEPLOYMENTS_LOG_PATH = "deployments.log"

OPERATOR_ACCOUNT_ID_KEY = "OPERATOR_ACCOUNT_ID"
OPERATOR_KEY_KEY = "OPERATOR_KEY"
HEDERA_NETWORK_KEY = "HEDERA_NETWORK"

# applied to both the SDK's default request timeout and max attempts
DEFAULT_TIMEOUT_MULTIPLIER = 3

CONTRACT_CREATE_GAS = 4_000_000
CONTRACT_EXECUTE_GAS = 2_000_000

SUCCESS_STATUS = "SUCCESS"
# stands in for a receipt status when the submission itself failed
NETWORK_ERROR_STATUS = "NETWORK_ERROR"

INITIAL_ACCOUNT_BALANCE_HBAR = 10
TOKEN_NAME = "hedeploy Demo Token"
TOKEN_SYMBOL = "HDT"
TOKEN_DECIMALS = 2
TOKEN_INITIAL_SUPPLY = 1_000_000

SOURCIFY_SERVER_URL = "https://sourcify.simonvienot.fr/server"
SOURCIFY_V2_SERVER_URL = "https://verify.simonvienot.fr/server"
VERIFY_REQUEST_TIMEOUT_SEC = 120

# fmt: off
CHAIN_IDS = {
    "mainnet": 0x127,
    "testnet": 0x128,
    "previewnet": 0x129,
}
# fmt: on
DEFAULT_CHAIN_ID = 0x129

METADATA_FILE_NAME = "metadata-1.json"
SOLC_JSON_INPUT_FILE_NAME = "SolcJsonInput.json"
ARTIFACTS_DIR = "artifacts"
