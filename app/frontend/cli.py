# app/frontend/cli.py
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from app.domain.errors import ProductClientError
from app.domain.schemas import ProductView
from app.frontend.finder import FinderState, FinderStatus, ProductFinder
from app.services.product_client import ProductClient

app = typer.Typer(
    help="Product Finder - look up products from the Product Service",
    no_args_is_help=True,
)
console = Console()


def format_price(price) -> str:
    return "-" if price is None else f"${float(price):.2f}"


def render(state: FinderState):
    if state.status == FinderStatus.LOADING:
        console.print("[dim]Loading product...[/dim]")
    elif state.status == FinderStatus.ERROR:
        console.print(
            Panel(state.error or "", title="Error loading product", border_style="red")
        )
    elif state.status == FinderStatus.SUCCESS:
        if state.product is None:
            console.print("Product not found")
            return
        p = state.product
        body = (
            f"{p.description or ''}\n\n"
            f"[bold]{format_price(p.price)}[/bold]\n"
            f"Product ID: {p.id}"
        )
        console.print(Panel(body, title=p.name or "", border_style="green"))


def render_table(products: list[ProductView]):
    table = Table(title="Products")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("Price", justify="right")
    for p in products:
        table.add_row(str(p.id), p.name or "", p.description or "", format_price(p.price))
    console.print(table)


@app.command()
def find(
    product_id: str = typer.Argument(..., help="Product ID (positive integer)"),
    base_url: str = typer.Option(None, "--url", help="Product API base URL"),
):
    """Look up a single product by ID."""
    with ProductClient(base_url) as client:
        finder = ProductFinder(client, on_change=render)
        if not finder.submit(product_id):
            console.print("[dim]Enter a positive product ID[/dim]")
            raise typer.Exit(code=2)
        if finder.state.status == FinderStatus.ERROR:
            raise typer.Exit(code=1)


@app.command()
def interactive(
    base_url: str = typer.Option(None, "--url", help="Product API base URL"),
):
    """Prompt for product IDs until 'q' is entered."""
    with ProductClient(base_url) as client:
        finder = ProductFinder(client, on_change=render)
        while True:
            raw = console.input("[bold]Enter Product ID[/bold] (q to quit): ")
            if raw.strip().lower() in ("q", "quit", "exit"):
                break
            finder.submit(raw)


@app.command("list")
def list_products(
    base_url: str = typer.Option(None, "--url", help="Product API base URL"),
):
    """List all products."""
    with ProductClient(base_url) as client:
        try:
            render_table(client.get_all_products())
        except ProductClientError as e:
            console.print(f"[red]{e.message}[/red]")
            raise typer.Exit(code=1)


@app.command()
def search(
    term: str = typer.Argument(..., help="Part of the product name"),
    base_url: str = typer.Option(None, "--url", help="Product API base URL"),
):
    """Search products by name."""
    with ProductClient(base_url) as client:
        try:
            render_table(client.search_products(term))
        except ProductClientError as e:
            console.print(f"[red]{e.message}[/red]")
            raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
