import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s: %(message)s'


def setup_logging(log_path: Optional[str] = None, level: int = logging.INFO) -> None:
    """Send log records to ``log_path`` (revtree.log by default)"""
    logging.basicConfig(
        filename=log_path or 'revtree.log',
        level=level,
        format=LOG_FORMAT
    )
