import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

def setup_logging(log_dir: Optional[Path] = None, level: str = "INFO") -> logging.Logger:
    """Set up logging to the console and, optionally, to a dated log file.
    
    Args:
        log_dir: Directory to store log files (no file logging if None)
        level: Name of the logging level for the root logger
        
    Returns:
        The configured root logger
    """
    handlers = [logging.StreamHandler()]

    if log_dir is not None:
        # Create log directory if it doesn't exist
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"compile-{datetime.now().strftime('%Y-%m-%d')}.log"
        handlers.append(logging.FileHandler(log_file))
    
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )
    
    return logging.getLogger()
