# cli.py - interactive front end for the product registry
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.registry import ProductClient

console = Console()
c = ProductClient(base_url="http://127.0.0.1:8080")


# Global state for status messages and caching
status_message = "Ready"
seen_products: Dict[str, Dict[str, Any]] = {}
user_cache = set()

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("Name", style="bold", width=20)
    table.add_column("Owner", width=14)
    table.add_column("Category", width=14)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Description", width=30)
    table.add_column("Created", style="dim", width=20)

    for p in products:
        table.add_row(
            p.get("name", "N/A"),
            p.get("username", "N/A"),
            p.get("category", "N/A"),
            str(p.get("price", 0)),
            p.get("description", ""),
            p.get("createdAt", "N/A"),
        )
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper with exception handling
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the decoded result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


def remember(product: Dict[str, Any]):
    seen_products[product["name"]] = product
    user_cache.add(product.get("username", ""))


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    return WordCompleter(list(seen_products), ignore_case=True)


def get_user_completer():
    return WordCompleter([u for u in user_cache if u], ignore_case=True)


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🏷️ Product Registry",
        f"[bold blue]{c.base_url}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def prompt_required(message: str, completer=None, default: str = "") -> str:
    while True:
        value = prompt_with_autocomplete(message, completer=completer, default=default).strip()
        if value:
            return value
        console.print("[red]A value is required.[/red]")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        options = [
            ("1", "➕ Register product"),
            ("2", "ℹ️ Get product by name"),
            ("3", "📋 Products seen this session"),
            ("q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter(["1", "2", "3", "q", "quit", "exit"])
        ).strip()

        if choice == "1":
            username = prompt_required("👤 Owner", completer=get_user_completer())
            name = prompt_required("🏷️ Product name")
            category = prompt_required("📂 Category", default="general")
            price = IntPrompt.ask("💰 Price", default=1)
            description = prompt_required("📝 Description")
            resp = try_api(
                c.register_product, username, name, category, price, description,
                success_msg=f"Product '{name}' registered successfully"
            )
            if resp:
                remember(resp)
                show_products([resp], title="✅ Registered")

        elif choice == "2":
            name = prompt_required("Enter product name", completer=get_product_completer())
            resp = try_api(c.get_product, name, success_msg=f"Product {name} loaded")
            if resp:
                remember(resp)
                show_products([resp])

        elif choice == "3":
            show_products(list(seen_products.values()), title="📋 Seen this session")

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
