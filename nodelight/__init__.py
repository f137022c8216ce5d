"""nodelight - reversible neighborhood highlighting for node-link graph views."""

# Load .env so NODELIGHT_RESOURCE_CONSTRAINED, NODELIGHT_MAX_DEPTH, etc. are set
# for any entry point (CLI, pytest, embedding applications) that imports nodelight.
from dotenv import load_dotenv

load_dotenv()

# Keep in sync with pyproject.toml [project] version.
__version__ = "0.1.0"
