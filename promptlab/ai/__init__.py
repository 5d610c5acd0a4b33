"""AI module initialization and configuration."""

from typing import Any, cast

import litellm


# Configure LiteLLM at module initialization
litellm.drop_params = True
# LiteLLM exposes suppress_debug_info as Literal[False]; cast avoids false-positive type errors
cast("Any", litellm).suppress_debug_info = True
