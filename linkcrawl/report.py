from typing import Iterable


def format_report(links: Iterable[str]) -> str:
    """Render discovered links as a numbered console listing."""
    lines = ["Links", "-----"]
    for i, link in enumerate(links, start=1):
        lines.append(f"{i:03d}. {link}")
    lines.append("")
    return "\n".join(lines) + "\n"
