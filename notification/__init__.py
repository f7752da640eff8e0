# notification package

"""
Notification payloads for detected build tools and their host collaborators.
"""

from .payload import NotificationPayload, UnknownLinkError, build_notification, resolve_link
from .renderer import render, choose_link
from .opener import open_in_editor

__all__ = [
    'NotificationPayload',
    'UnknownLinkError',
    'build_notification',
    'resolve_link',
    'render',
    'choose_link',
    'open_in_editor'
]
