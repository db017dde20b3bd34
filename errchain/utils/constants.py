"""
Centralized UI constants for consistent styling across errchain.

Symbols and styles used when a chain is rendered to a Rich console.
"""

# Colorblind-friendly symbols and styles
SYMBOLS = {
    "chain": "⛓️ ",
    "root": "[bold red]![/bold red] ",
    "foreign": "[bold yellow]⚠[/bold yellow] ",
    "cause": "→ ",
    "success": "[bold green]✓[/bold green] ",
    "more": "… ",
}

STYLE = {
    "header": "bold cyan",
    "dim": "dim",
    "type": "magenta",
    "message": "default",
    "empty": "dim italic",
    "error": "red",
    "success": "green",
}
