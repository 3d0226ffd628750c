import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.WARNING, log_dir: Optional[Path] = None) -> logging.Logger:
    """Set up logging to the console and, optionally, to a file.
    
    Args:
        level: Minimum level for console output
        log_dir: Directory for a ``dotnet-test.log`` file capturing DEBUG and above
        
    Returns:
        Logger instance for the tool
    """
    handlers = [logging.StreamHandler()]
    if log_dir is not None:
        # Create log directory if it doesn't exist
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "dotnet-test.log")
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)
    
    # Configure root logger
    logging.basicConfig(
        level=logging.DEBUG if log_dir is not None else level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
    
    # Console handler follows the configured level
    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)
    
    return logging.getLogger("dotnet_test")
