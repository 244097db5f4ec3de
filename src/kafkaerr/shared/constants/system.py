"""Application identity constants."""

from typing import Final


class Application:
    """Application identity."""

    NAME: Final = "kafkaerr"
    VERSION: Final = "1.0.0"
    ENV_PREFIX: Final = "KAFKAERR_"
    CONFIG_ENV_VAR: Final = "KAFKAERR_CONFIG"
