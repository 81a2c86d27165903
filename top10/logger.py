import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

def get_logger(name: str = "top10") -> logging.Logger:
    """Return a logger under the top10 namespace"""
    return logging.getLogger(name)
