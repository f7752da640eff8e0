"""
Color utilities for the terminal notification banner.
"""

class Colors:
    """ANSI color codes used by the notification renderer."""
    
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    
    BRIGHT_RED = '\033[1;91m'
    BRIGHT_GREEN = '\033[1;92m'
    
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'
    
    RESET = '\033[0m'

def colorize(text: str, color: str) -> str:
    """Apply color to text."""
    return f"{color}{text}{Colors.RESET}"

def title(text: str) -> str:
    """Format a notification title."""
    return colorize(text, Colors.BOLD)

def link(text: str) -> str:
    """Format a clickable link label."""
    return colorize(text, Colors.UNDERLINE + Colors.BLUE)

def success(text: str) -> str:
    """Format success text."""
    return colorize(f"[SUCCESS] {text}", Colors.BRIGHT_GREEN)

def error(text: str) -> str:
    """Format error text."""
    return colorize(f"[ERROR] {text}", Colors.BRIGHT_RED)
