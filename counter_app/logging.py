import logging

logger = logging.getLogger("counter_app")
