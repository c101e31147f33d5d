"""CLI interface for DFA API services.

Provides commands for:
- Listing the registered services
- Checking credentials
- Listing spotlight activity types
- Searching users
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ...config import get_settings
from ...errors import DfaError
from ...services import DfaService
from ...user import DfaUser

app = typer.Typer(
    name="dfa-services",
    help="DFA Services CLI - Call DoubleClick for Advertisers SOAP services",
)
console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (defaults to DFA_LOG_LEVEL or INFO)",
    ),
):
    """Configure logging for all commands."""
    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def services(
    api_version: Optional[str] = typer.Option(
        None, "--api-version", "-v", help="Only list services of this version, e.g. v1.12"
    ),
):
    """List the registered DFA services."""
    table = Table(title="DFA Services")
    table.add_column("Version", style="cyan")
    table.add_column("Service")
    table.add_column("Endpoint", style="yellow")
    table.add_column("Namespace")

    versions = [v for v in DfaService.versions() if api_version in (None, v.version)]
    if not versions:
        console.print(f"[red]Unknown API version: {api_version}[/red]")
        raise typer.Exit(1)

    for version in versions:
        for signature in version:
            table.add_row(
                signature.version,
                signature.service_name,
                signature.service_endpoint,
                signature.service_type.BINDING_NAMESPACE or "",
            )

    console.print(table)


@app.command()
def authenticate(
    api_version: str = typer.Option("v1.12", "--api-version", "-v", help="API version"),
    server_url: Optional[str] = typer.Option(None, "--server", "-s", help="API server URL"),
):
    """Log in with the configured credentials.

    A configured DFA_AUTH_TOKEN is used as-is, without a call to the server.
    """
    user = DfaUser(settings=get_settings())
    token_configured = bool(user.factory.headers.get("authToken"))
    try:
        signature = DfaService.get_signature(api_version, "UserRemoteService")
        user.get_service(signature, server_url)
    except DfaError as e:
        console.print(f"[red]Failed to authenticate. Exception says \"{e}\"[/red]")
        raise typer.Exit(1)

    user_name = user.factory.auth_token.user_name
    if token_configured:
        console.print(
            f"[yellow]Using the configured auth token for {user_name}. "
            "It was not checked against the server.[/yellow]"
        )
        return

    console.print(f"[green]✓[/green] Authenticated as {user_name}")


@app.command("activity-types")
def activity_types(
    server_url: Optional[str] = typer.Option(None, "--server", "-s", help="API server URL"),
):
    """Display spotlight activity type names and IDs."""
    user = DfaUser(settings=get_settings())
    try:
        service = user.get_service(DfaService.v1_12.SpotlightRemoteService, server_url)
        results = service.service.getSpotlightActivityTypes() or []
    except DfaError as e:
        console.print(f"[red]Failed to retrieve activity types. Exception says \"{e}\"[/red]")
        raise typer.Exit(1)

    table = Table(title="Spotlight Activity Types")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    for result in results:
        table.add_row(str(getattr(result, "id", "")), str(getattr(result, "name", "")))

    console.print(table)


@app.command()
def users(
    search: str = typer.Argument("", help="Search string for user names"),
    page_size: int = typer.Option(10, "--page-size", "-n", help="Maximum records to show"),
    server_url: Optional[str] = typer.Option(None, "--server", "-s", help="API server URL"),
):
    """Search users by name."""
    user = DfaUser(settings=get_settings())
    try:
        service = user.get_service(DfaService.v1_11.UserRemoteService, server_url)
        record_set = service.service.getUsersByCriteria(
            {"pageSize": page_size, "searchString": search}
        )
    except DfaError as e:
        console.print(f"[red]Failed to retrieve users. Exception says \"{e}\"[/red]")
        raise typer.Exit(1)

    records = getattr(record_set, "records", None) or []
    if not records:
        console.print("No users found for your search criteria.")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Network ID")
    table.add_column("Subnetwork ID")
    table.add_column("User Group ID")
    for record in records:
        table.add_row(
            str(getattr(record, "id", "")),
            str(getattr(record, "name", "")),
            str(getattr(record, "networkId", "")),
            str(getattr(record, "subnetworkId", "")),
            str(getattr(record, "userGroupId", "")),
        )

    console.print(table)


if __name__ == "__main__":
    app()
