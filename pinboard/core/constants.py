"""Core constants: cache key prefixes, search messages and shared literals."""

# Cache key prefix for memoized search responses
CACHE_PREFIX_SEARCH = "search"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# User-facing search error messages
SEARCH_FAILED_MESSAGE = "Search failed. Please try again."
SEARCH_UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred during search."

# Text search
TEXT_SEARCH_CONFIG = "english"
PREFIX_MARKER = ":*"
AND_OPERATOR = " & "
MIN_TOKEN_LENGTH = 2

# Suggestions
MIN_SUGGESTION_TEXT_LENGTH = 2
MAX_SUGGESTIONS = 5
