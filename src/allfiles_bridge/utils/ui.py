"""
Terminal output for the bridge CLI.
"""

from typing import Dict

from rich.console import Console

from ..schemas import PermissionStatus, RequestAck
from .platform_detector import PlatformCapabilities

THEME: Dict[str, str] = {
    "success": "#00ff88",  # Green
    "error": "#f85149",  # Red
    "warning": "#d29922",  # Yellow
    "text": "#e6edf3",  # Main text
    "muted": "#7d8590",  # Muted text
    "accent": "#00ccff",  # Cyan
}

ICONS: Dict[str, str] = {
    "success": "✓",
    "error": "✗",
    "warning": "⚠",
    "arrow": "❯",
}

console = Console()


def print_status(status: PermissionStatus) -> None:
    """Print the result of a permission check."""
    if status.granted:
        console.print(
            f"  [{THEME['success']}]{ICONS['success']}[/] "
            f"[{THEME['text']}]All files access granted[/]"
        )
    else:
        console.print(
            f"  [{THEME['error']}]{ICONS['error']}[/] "
            f"[{THEME['text']}]All files access not granted[/]"
        )


def print_ack(ack: RequestAck) -> None:
    """Print the result of a permission request."""
    console.print(
        f"  [{THEME['accent']}]{ICONS['arrow']}[/] "
        f"[{THEME['text']}]Settings screen requested[/] "
        f"[{THEME['muted']}](requested={str(ack.requested).lower()})[/]"
    )


def print_platform_info(capabilities: PlatformCapabilities) -> None:
    """Print detected platform details."""
    scoped = "yes" if capabilities.scoped_storage_supported else "no"
    rows = [
        ("Platform", f"{capabilities.os_type} {capabilities.os_version}"),
        ("Backend", capabilities.backend),
        ("API level", str(capabilities.sdk_int)),
        ("Scoped storage", scoped),
        ("Package", capabilities.package_name),
    ]
    for label, value in rows:
        console.print(f"  [{THEME['muted']}]{label:<15}[/] [{THEME['text']}]{value}[/]")
