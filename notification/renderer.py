"""
Terminal rendering of build tool notifications.
"""

import re
from typing import Callable, List, Optional

from utils.colors import Colors, colorize, link, title

from .payload import NotificationPayload

ANCHOR_PATTERN = re.compile(r'<a href="([^"]*)">([^<]*)</a>')

ICON_MARKERS = {
    "MAVEN": "[M]",
    "GRADLE": "[G]",
    "UNKNOWN": "[?]",
}

def render(payload: NotificationPayload) -> str:
    """
    Render a notification as a terminal banner.
    
    Line breaks in the body become newlines and each anchor becomes a
    numbered link, numbered in the order of payload.links.
    
    Args:
        payload: Notification to render
        
    Returns:
        Multi-line string ready to print
    """
    numbers = {identifier: i for i, identifier in enumerate(payload.links, start=1)}
    
    def replace_anchor(match: re.Match) -> str:
        identifier, text = match.group(1), match.group(2)
        return f"[{numbers[identifier]}] {link(text)}"
    
    body = ANCHOR_PATTERN.sub(replace_anchor, payload.body).replace("<br>", "\n")
    header = f"{colorize(ICON_MARKERS[payload.icon.name], Colors.CYAN)} {title(payload.title)}"
    lines = [header] + [f"   {line}" for line in body.split("\n")]
    return "\n".join(lines)

def choose_link(payload: NotificationPayload, input_fn: Optional[Callable[[str], str]] = None) -> Optional[str]:
    """
    Ask the user which link of the notification to activate.
    
    Args:
        payload: Notification whose links are offered
        input_fn: Function used to read the answer, defaults to input()
        
    Returns:
        Identifier of the chosen link, or None if there are no links or
        the user skipped
    """
    read = input_fn or input
    identifiers: List[str] = list(payload.links)
    if not identifiers:
        return None
    
    while True:
        response = read(f"   Open a build file? (1-{len(identifiers)}, Enter to skip): ").strip()
        if not response:
            return None
        if response.isdecimal() and 1 <= int(response) <= len(identifiers):
            return identifiers[int(response) - 1]
        print(f"   Please enter a number between 1 and {len(identifiers)}.")
