"""Constants for entity context variable parsing and resolution."""

from homeassistant.const import ATTR_FRIENDLY_NAME

# Delimiter pairs
DELIMITER_SQUARE = "square"
DELIMITER_CURLY = "curly"

DELIMITER_PAIRS: dict[str, tuple[str, str]] = {
    DELIMITER_SQUARE: ("[[", "]]"),
    DELIMITER_CURLY: ("{{", "}}"),
}
ALL_DELIMITERS = frozenset(DELIMITER_PAIRS)

OPEN_DELIMITERS: tuple[str, ...] = tuple(opener for opener, _ in DELIMITER_PAIRS.values())
CLOSE_DELIMITERS: tuple[str, ...] = tuple(closer for _, closer in DELIMITER_PAIRS.values())

# Expression grammar tokens
ENTITY_TOKEN = "entity"
ENTITY_ID_TOKEN = "entity_id"
ENTITY_PREFIX = "entity:"
PATH_SEPARATOR = "."
FILTER_SEPARATOR = "|"

# Record fields
FIELD_ENTITY_ID = "entity_id"
FIELD_ID = "id"
FIELD_STATE = "state"
FIELD_ATTRIBUTES = "attributes"
FIELD_LAST_CHANGED = "last_changed"
FIELD_LAST_UPDATED = "last_updated"
FIELD_FRIENDLY_NAME = ATTR_FRIENDLY_NAME

DEFAULT_PROPERTY_PATH: tuple[str, ...] = (FIELD_STATE,)
DEFAULT_EMPTY = ""

# Filter names
FILTER_UPPER = "upper"
FILTER_LOWER = "lower"
FILTER_ROUND = "round"
FILTER_DEFAULT = "default"

# Configuration defaults
DEFAULT_ROUND_PRECISION = 0
MAX_ROUND_PRECISION = 15
DEFAULT_CARD_TEXT_FIELDS: tuple[str, ...] = ("name", "title", "content")

# Card keys used to find the primary entity
CARD_ENTITY_KEY = "entity"
CARD_ENTITIES_KEY = "entities"
