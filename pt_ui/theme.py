from __future__ import annotations

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}


def presenter_line(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)
