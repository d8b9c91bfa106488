import os
from dotenv import load_dotenv
from pathlib import Path
import bittensor as bt

env_path = Path(__file__).parents[1] / '.env'
load_dotenv(dotenv_path=env_path)

__version__ = "1.0.0"

# Data sources
DATA_DIR = Path(os.getenv('DATA_DIR', str(Path(__file__).resolve().parents[3] / "data")))
SOCIAL_EXPORT_FILE = "eternum-social-export.json"
CARTRIDGE_POINTS_FILE = "cartridge-points.json"
DAYDREAMS_QUALIFIERS_FILE = "daydreams-qualifiers.json"
KNOWN_ADDRESSES_FILE = "known-addresses.json"
MARKETPLACE_SALES_FILE = "marketplace-sales.json"

# Token pricing
COINGECKO_PRICE_URL = os.getenv(
    'COINGECKO_PRICE_URL',
    'https://api.coingecko.com/api/v3/simple/price'
    '?ids=lords,starknet&vs_currencies=usd&include_24hr_change=true&include_last_updated_at=true'
)
PRICE_REFRESH_SECONDS = 5 * 60
FALLBACK_LORDS_PRICE_USD = 0.02
FALLBACK_STRK_PRICE_USD = 1.15

# Victory prizes: share of the season pool (percent) by tribe rank
RANK_PRIZE_PERCENTAGES = {
    1: 30.0,
    2: 18.0,
    3: 12.0,
    4: 9.0,
    5: 7.0,
    6: 6.0,
    7: 5.0,
    8: 5.0,
    9: 4.0,
    10: 4.0,
}

# Split of each tribe prize between members (by points) and the tribe owner
MEMBER_POOL_SHARE = float(os.getenv('MEMBER_POOL_SHARE', '0.70'))
OWNER_BONUS_SHARE = float(os.getenv('OWNER_BONUS_SHARE', '0.30'))

# Achievement pools
CARTRIDGE_LORDS_POOL = float(os.getenv('CARTRIDGE_LORDS_POOL', '100000'))
DAYDREAMS_STRK_POOL = float(os.getenv('DAYDREAMS_STRK_POOL', '25000'))
DAYDREAMS_ACHIEVEMENT_ID = os.getenv('DAYDREAMS_ACHIEVEMENT_ID', 'DAYDREAMS_AGENT')

# Season pass supply
TOTAL_REALMS_NFTS = 8000  # Ethereum + Starknet
REALMS_BRIDGED_TO_STARKNET = 5106
SEASON_PASSES_MINTED = 3614
SEASON_PASSES_USED = 2173
WEI_PER_LORDS = 10 ** 18

# Revenue breakdown
VILLAGE_PASSES_SOLD = 1264
VILLAGE_PASS_PRICE_USD = 5
DONKEY_NETWORK_ADDRESS = "0x01d490c9345ae1fc0c10c8fd69f6a9f31f893ba7486eae489b020eea1f8a8ef7"
VELORDS_ADDRESS = "0x045c587318c9ebcf2fbe21febf288ee2e3597a21cd48676005a5770a50d433c5"
SEASON_POOL_ADDRESS = "0x04cd21aa3e634e36d6379bdbb3fef78f7e0a882eb8a048624c4b02eead1bc553"
CLIENT_INTEGRATION_ADDRESS = "0x009d838f2db23afd64e4a2a116eda44a00cda1b1c8cb2ce9c11eb534e8bc50e0"

# API server
API_HOST = os.getenv('API_HOST', '0.0.0.0')
API_PORT = int(os.getenv('API_PORT', '8095'))

# Log out all non-sensitive config variables
bt.logging.info(f"DATA_DIR: {DATA_DIR}")
bt.logging.info(f"PRICE_REFRESH_SECONDS: {PRICE_REFRESH_SECONDS}")
bt.logging.info(f"MEMBER_POOL_SHARE: {MEMBER_POOL_SHARE}")
bt.logging.info(f"OWNER_BONUS_SHARE: {OWNER_BONUS_SHARE}")
bt.logging.info(f"CARTRIDGE_LORDS_POOL: {CARTRIDGE_LORDS_POOL}")
bt.logging.info(f"DAYDREAMS_STRK_POOL: {DAYDREAMS_STRK_POOL}")
bt.logging.info(f"DAYDREAMS_ACHIEVEMENT_ID: {DAYDREAMS_ACHIEVEMENT_ID}")
bt.logging.info(f"API_PORT: {API_PORT}")
