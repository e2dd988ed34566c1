"""
Project configuration and versioning for QuickBible.
"""

APP_NAME = "QuickBible"
__version__ = "0.3.0"

# External link templates
BIBLEHUB_URL_TEMPLATE = "https://biblehub.com/{slug}/{chapter}-{verse}.htm"
AUDIO_URL_TEMPLATE = "https://audio.esv.org/hw/mq/{start}-{end}"

# Command prefix the chat front end puts in front of a link token (/v_John_3_16)
LINK_COMMAND_PREFIX = "/v_"

# Search results shown per page
SEARCH_PAGE_SIZE = 5

# Cross references shown for one verse
XREF_DISPLAY_LIMIT = 20
