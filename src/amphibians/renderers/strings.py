"""User-facing text."""

APP_NAME = "Amphibians"
LOADING_AMPHIBIANS = "Loading amphibians..."
LOADING_FAILED = "Failed to load amphibians. Please check your connection."
NO_AMPHIBIANS_FOUND = "No amphibians found."
RETRY_BUTTON = "Retry"
AMPHIBIAN_IMAGE_DESCRIPTION = "Image of {name}"
