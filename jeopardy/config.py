"""
Configuration for the Jeopardy board API.

Values are read from the environment once at import time. A local .env file
(see .env.example) is loaded first so development setups don't need to export
anything by hand.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Base URL of the category feed; categories are fetched from {url}/category?id=N
JEOPARDY_API_URL = os.getenv("JEOPARDY_API_URL", "https://rithm-jeopardy.herokuapp.com/api")

# Board dimensions: columns and rows
NUM_CATEGORIES = int(os.getenv("JEOPARDY_NUM_CATEGORIES", "6"))
NUM_QUESTIONS_PER_CAT = int(os.getenv("JEOPARDY_NUM_QUESTIONS_PER_CAT", "5"))

# Contiguous range of candidate category ids, both ends inclusive.
# Some ids in the range are known to fail on the feed and are skipped.
FIRST_CATEGORY_ID = int(os.getenv("JEOPARDY_FIRST_CATEGORY_ID", "2"))
LAST_CATEGORY_ID = int(os.getenv("JEOPARDY_LAST_CATEGORY_ID", "19"))
CATEGORY_ID_RANGE = range(FIRST_CATEGORY_ID, LAST_CATEGORY_ID + 1)

REQUEST_TIMEOUT = float(os.getenv("JEOPARDY_REQUEST_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
