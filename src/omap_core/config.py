"""Grammar characters and parser limits."""

QUOTE = '"'
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
COLON = ":"
COMMA = ","

# Nesting levels accepted by the reader before it gives up.
DEFAULT_MAX_DEPTH = 200
