import logging
from expiry_tracker.config import settings

def setup_logger():
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger("expiry_tracker")

logger = setup_logger()
