import logging
import os
import sys

from sasi_site.rules.models import SiteRules

logger = logging.getLogger(__name__)


def configure_logging(rules: SiteRules) -> None:
    """Configure root logging from the ops rules."""
    logging.basicConfig(
        level=rules.ops.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_ops_rules(rules: SiteRules) -> None:
    """
    Validate operational requirements before startup.
    """
    missing = [env_var for env_var in rules.ops.required_env if env_var not in os.environ]

    if missing:
        logger.critical("Missing required environment variables: %s", ", ".join(missing))
        sys.exit(1)

    logger.info("Configuration validated.")
