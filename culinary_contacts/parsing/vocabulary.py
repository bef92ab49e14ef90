"""
Static vocabulary for company name parsing.

The parser rules are pure functions over these lists. Keeping the data
here lets each list be extended without touching rule code.
"""

# US cities, NYC boroughs and state abbreviations that show up glued to
# company names ("Seaport Entertainment GroupNew York, NY").
PLACE_NAMES: tuple[str, ...] = (
    # Major cities
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia",
    "San Antonio", "San Diego", "Dallas", "San Jose", "Austin", "Jacksonville",
    "Fort Worth", "Columbus", "Indianapolis", "Charlotte", "San Francisco",
    "Seattle", "Denver", "Washington", "Boston", "El Paso", "Nashville",
    "Detroit", "Oklahoma City", "Portland", "Las Vegas", "Memphis", "Louisville",
    "Baltimore", "Milwaukee", "Albuquerque", "Tucson", "Fresno", "Sacramento",
    "Kansas City", "Miami", "Omaha", "Raleigh", "Oakland", "Minneapolis",
    "Tulsa", "Cleveland", "Wichita", "Arlington", "New Orleans", "Bakersfield",
    "Tampa", "Honolulu", "Aurora", "Anaheim", "Santa Ana", "St. Louis",
    "Pittsburgh", "Cincinnati", "Henderson", "Riverside", "St. Paul",
    # NYC boroughs
    "Manhattan", "Brooklyn", "Queens", "The Bronx", "Staten Island", "NYC",
    # State abbreviations
    "NY", "LA", "IL", "CA", "FL", "TX", "GA", "MA", "SF", "DC", "PA",
    "WA", "CO", "AZ", "TN", "MO", "OR", "NV", "KY", "IN", "OH", "NC",
    "MI", "MD", "VA", "NJ", "MN",
)

# Longest first so "New York" wins over "NY"
PLACE_NAMES_BY_LENGTH: tuple[str, ...] = tuple(sorted(PLACE_NAMES, key=len, reverse=True))

PLACE_NAMES_LOWER: frozenset[str] = frozenset(p.lower() for p in PLACE_NAMES)

# Industry terms that are never a company name on their own
GENERIC_TERMS: frozenset[str] = frozenset({
    "restaurant group", "hospitality group", "restaurant", "hospitality",
    "group", "consulting", "management", "restaurant consulting",
    "hospitality consulting", "food and beverage", "f&b",
    "bar", "cafe", "bistro", "tavern", "eatery", "catering",
    "culinary", "culinary group", "bakery", "dining", "dining group",
    "restaurant management", "hospitality management", "fine dining",
})

# Rejected only when they are the whole (single-word) name
STANDALONE_GENERIC_WORDS: frozenset[str] = frozenset({
    "restaurant", "hospitality", "bar", "cafe", "bistro", "tavern",
    "eatery", "catering", "culinary", "bakery", "dining",
})

# Generic suffixes that make an extracted fragment "generic plus one word"
GENERIC_SUFFIXES: tuple[str, ...] = (
    " restaurant group", " fine dining", " hospitality group", " restaurant", " hospitality",
)

# Keywords that mark the restaurant name inside a longer string
RESTAURANT_KEYWORDS: tuple[str, ...] = (
    "restaurants by", "restaurants of", "restaurant group", "hospitality group",
    "dining group", "food group", "culinary group", "chef", "kitchen",
    "bistro", "cafe", "dining", "eatery", "tavern", "grill", "restaurant",
)

# Venue words that are often glued to the next capitalized word ("HappyHourWashington")
VENUE_SUFFIX_WORDS: tuple[str, ...] = (
    "hour", "room", "cafe", "bar", "club", "bistro", "grill", "tap",
    "lounge", "den", "pub", "inn", "shop", "house", "bakery",
)

# Brand tokens that contain a venue word and must stay in one piece
UNSPLITTABLE_BRAND_TOKENS: tuple[str, ...] = ("Barbecue",)

# Tokens that must never be split on a lower/upper case change
PROTECTED_TOKENS: tuple[str, ...] = ("NYC", "SoHo")

# Name endings that are part of a real multi-word company name
WHOLE_NAME_SUFFIXES: tuple[str, ...] = (
    r"restaurant\s+group",
    r"hospitality\s+group",
    r"fine\s+dining",
    r"culinary\s+group",
    r"dining\s+group",
    r"restaurant\s+management",
    r"hospitality\s+management",
)

# All-caps forms preserved intact ("MARCUS SAMUELSSON RESTAURANT GROUP")
ALL_CAPS_WHOLE_NAME_SUFFIXES: tuple[str, ...] = (
    r"RESTAURANT\s+GROUP",
    r"HOSPITALITY\s+GROUP",
    r"FINE\s+DINING",
    r"CULINARY\s+GROUP",
)

# Lead words for which "<word> group" is a protected compound
PROTECTED_GROUP_LEAD_WORDS: tuple[str, ...] = (
    "square", "food", "hospitality", "culinary", "entertainment",
)

LEGAL_SUFFIXES: tuple[str, ...] = ("LLC", "Inc", "Corporation", "Corp", "Co")

TRAILING_GENERIC_NOUNS: tuple[str, ...] = (
    "restaurant", "bar", "café", "cafe", "grill", "bistro", "tavern", "kitchen",
)

# Job-title fragments that leak in front of the company name
JOB_TITLE_PREFIXES: tuple[str, ...] = (
    "chef", "sous chef", "pastry chef", "head chef", "executive chef",
    "general manager", "assistant manager", "manager", "director",
    "server", "bartender", "host", "hostess", "cook", "line cook",
    "a.m.", "p.m.", "morning", "evening", "night", "day", "weekend",
)

# Words that make "<place> ..." a real company ("Brooklyn Brewery")
PLACE_PREFIX_QUALIFIERS: tuple[str, ...] = (
    "brewery", "culinary", "dining", "restaurants", "kitchen", "tavern", "bistro",
)

# Street-address tokens used by the address candidate extractor
STREET_ADDRESS_WORDS: frozenset[str] = frozenset({
    "street", "st", "avenue", "ave", "road", "rd", "blvd", "boulevard", "drive", "dr",
    "lane", "ln", "court", "ct", "place", "pl", "way", "circle", "cir", "suite", "ste",
    "floor", "fl", "unit", "apt", "apartment", "#",
})

GENERIC_ADDRESS_TERMS: frozenset[str] = frozenset({
    "restaurant group", "hospitality group", "restaurant", "hospitality",
    "group", "consulting", "management", "fine dining",
})

# Staffing agencies, aggregators and contract caterers that are never the
# actual employer, plus geography that leaks into the company field.
DEFAULT_EXCLUDED_COMPANIES: tuple[str, ...] = (
    "Alliance Personnel", "August Point Advisors", "Bon Appetit",
    "Capital Restaurant Associates", "Chartwells", "Compass", "CORE Recruitment",
    "EHS Recruiting", "Empowered Hospitality", "Eurest", "Goodwin Recruiting",
    "HMG Plus - New York", "LSG Sky Chefs", "Major Food Group", "Measured HR",
    "One Haus", "Patrice & Associates", "Persone NYC", "Playbook Advisors",
    "Restaurant Associates", "Source One Hospitality", "STARR",
    "Ten Five Hospitality", "The Goodkind Group", "Tuttle Hospitality",
    "Willow Tree Recruiting",
    "washington", "washington dc", "washington d.c.", "washington d c",
)

DEFAULT_PARTIAL_EXCLUSIONS: tuple[str, ...] = ("whole foods",)
