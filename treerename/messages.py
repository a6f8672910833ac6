"""Human-readable messages shown to the user."""

# Log lines recorded by the renamer, one per event.
FOUND_TEMPLATE = "Found {path}"
RENAMED_TEMPLATE = "Renamed to {path}"

# Request validation, mirroring the prompts of the input form.
BLANK_PATH_MESSAGE = "Please enter a path"
BLANK_TARGET_MESSAGE = "Please enter a new file name"

INVALID_PATH_MESSAGE = "Invalid path: {path}"
NO_MATCH_MESSAGE = "No source file found."


def found_line(path: object) -> str:
    """Log line for a file that satisfied the filter."""
    return FOUND_TEMPLATE.format(path=path)


def renamed_line(path: object) -> str:
    """Log line for a completed rename, given the new path."""
    return RENAMED_TEMPLATE.format(path=path)
