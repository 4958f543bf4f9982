# config.py
import os

from dotenv import load_dotenv

load_dotenv()

# BMKG public forecast endpoint, queried by ADM4 (village level) code
BMKG_API_URL = os.getenv(
    "BMKG_API_URL",
    "https://api.bmkg.go.id/publik/prakiraan-cuaca",
)
BMKG_ADM4 = os.getenv("BMKG_ADM4", "31.71.03.1001")  # Kemayoran, Jakarta Pusat
REQUEST_TIMEOUT = float(os.getenv("BMKG_TIMEOUT", "15"))
USER_AGENT = os.getenv("BMKG_USER_AGENT", "bmkg-forecast/0.1")

# local_datetime values carry no zone marker; BMKG publishes them in WIB
LOCAL_UTC_OFFSET_HOURS = 7
WINDOW_HOURS = 24

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
