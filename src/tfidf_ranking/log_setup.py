import sys

from loguru import logger

from tfidf_ranking.config import Config


def setup_logging(level: str | None = None) -> None:
    """Configure Loguru once, based on Config.log_level unless a level is given."""
    logger.remove()  # drop the default handler to avoid duplicate lines
    logger.add(
        sys.stderr,
        level=(level or Config.log_level).upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        backtrace=False,
        diagnose=False,
    )
