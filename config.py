# config.py
import os

# zone used to decide what "today" is
TIMEZONE = os.getenv("JALALI_PICKER_TIMEZONE", "Asia/Tehran")

LOG_LEVEL = os.getenv("JALALI_PICKER_LOG_LEVEL", "INFO")

# "fa" or "en"
DEFAULT_LOCALE = os.getenv("JALALI_PICKER_LOCALE", "fa")

# demo picker range (jalali y, m, d)
DEFAULT_FIRST_DATE = (1395, 8, 1)
DEFAULT_LAST_DATE = (1445, 8, 30)
