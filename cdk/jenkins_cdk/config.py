import logging
from configparser import ConfigParser
from os import getenv
from pathlib import Path

from aws_cdk import Environment

logger = logging.getLogger(__name__)

DEFAULTS = Path(__file__).parent / "config.ini"

config = ConfigParser()
# Package defaults first, then a config.ini next to the app overrides them
config.read([DEFAULTS, "config.ini"])


def environment():
    """
    Target account/region from the CDK CLI variables.

    Returns None unless both are set, which makes the stacks
    environment-agnostic.
    """
    account = getenv("CDK_DEFAULT_ACCOUNT")
    region = getenv("CDK_DEFAULT_REGION")
    if not account or not region:
        logger.info("CDK_DEFAULT_ACCOUNT/CDK_DEFAULT_REGION not set, synthesizing environment-agnostic stacks")
        return None
    logger.info("Synthesizing for account %s in %s", account, region)
    return Environment(account=account, region=region)
