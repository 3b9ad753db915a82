"""Constants and static configuration for the DSN parser."""

# Logging
LOGGER_NAME = "dsnparse"
CREDENTIAL_MASK = "***"

# Scheme grammar: [a-zA-Z][a-zA-Z0-9+-.]*
SCHEME_EXTRA_CHARS = "+-."
SCHEME_SEPARATOR = "://"

# Body delimiters
CREDENTIALS_SEPARATOR = "@"
PASSWORD_SEPARATOR = ":"
ADDRESS_OPEN = "("
ADDRESS_CLOSE = ")"
PATH_SEPARATOR = "/"
QUERY_SEPARATOR = "?"

# Error messages
ERROR_INVALID_SCHEME = "missing protocol scheme"
ERROR_MISSING_SLASH = "missing the slash separating the database name"
ERROR_UNTERMINATED_ADDRESS = "network address not terminated (missing closing brace)"
ERROR_UNESCAPED_VALUE = "did you forget to escape a param value"

DSN_FORMAT = "[scheme://][username[:password]@][protocol[(address)]]/path[?key=value&...]"
