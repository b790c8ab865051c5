"""Project-wide constants."""

# -- DBLP -------------------------------------------------------------------
DBLP_FEED_URL: str = "https://dblp.org/pid/11/1649.xml"
ENTRY_TAG: str = "r"

# -- Record defaults --------------------------------------------------------
DEFAULT_TITLE: str = "No Title"
DEFAULT_AUTHORS: str = "No Authors"
DEFAULT_YEAR: str = "No Year"
DEFAULT_URL: str = "#"
UNPUBLISHED_VENUE: str = "Unpublished"

# -- Venue blacklist (matched as lowercase substrings) ----------------------
EXCLUDED_VENUE_SUBSTRINGS: tuple[str, ...] = (
    "corr",
    "electron. colloquium comput. complex",
)

# -- Rendering --------------------------------------------------------------
CONTAINER_ID: str = "publications-list"
EMPTY_PLACEHOLDER: str = "No publications found."
DEFAULT_PAGE_TITLE: str = "Publications"
