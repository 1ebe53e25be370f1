"""
Logging utilities for Osero.
"""
import os
import json
import logging
from datetime import datetime
from typing import Optional

from .config import Config

class Logger:
    """Configures the package logger for a game session."""
    
    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.
        
        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir or "logs"
        self.run_dir = None
        level = getattr(logging, config.logging.log_level.upper(), logging.WARNING)
        
        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.console.setFormatter(formatter)
        
        self.logger = logging.getLogger('osero')
        self.logger.setLevel(level)
        self.logger.addHandler(self.console)
        self.handlers = [self.console]
        
        # Set up file logging
        if config.logging.log_to_file:
            self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
            self.run_dir = os.path.join(self.log_dir, self.run_name)
            os.makedirs(self.run_dir, exist_ok=True)
            
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'osero.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handlers.append(file_handler)
            
            self.save_config()
    
    def save_config(self):
        """Save the configuration to a JSON file in the run directory."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)
    
    def close(self):
        """Detach and close the handlers this logger added."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.
    
    Args:
        config: Configuration object
        
    Returns:
        Logger instance
    """
    return Logger(config)
