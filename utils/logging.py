import logging
from datetime import datetime
from pathlib import Path

def setup_logging(log_dir: Path, level: str = 'INFO') -> logging.Logger:
    """Set up logging to a dated file and to the console.
    
    Args:
        log_dir: Directory to store log files
        level: Name of the console log level (e.g. 'INFO', 'DEBUG')
        
    Returns:
        Root logger configured for file and console logging
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    
    # One log file per day
    log_file = log_dir / f"{datetime.now().strftime('%Y-%m-%d')}.log"
    
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),  # File handler keeps everything
            logging.StreamHandler()  # Console handler follows --log-level
        ]
    )
    
    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(getattr(logging, level))
    
    return logging.getLogger()
