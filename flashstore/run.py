"""Command-line interface for the flashstore demo app and flash tokens.

Usage:
    flashstore dev --host 0.0.0.0 --port 3000
    flashstore serve --config production --host 0.0.0.0 --port 3000
    flashstore config-check
    flashstore routes
    flashstore gen-salt
    flashstore sign-token '{"info": "Welcome"}'
    flashstore verify-token <token>

"""
import json
import typer
from typing import Optional
from enum import Enum
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from flashstore.config import DevelopmentConfig, ProductionConfig
from flashstore.errors import MissingSigningSaltError
from flashstore.flash import FlashStore
from flashstore.main import create_app
from flashstore.tokens import COOKIE_NAME, TOKEN_MAX_AGE, random_signing_salt, sign_token, verify_token

app = typer.Typer(help="CLI tool for the flashstore demo app and flash tokens")
console = Console()


class ConfigMode(str, Enum):
    """Supported configuration modes."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"


CONFIG_CLASSES = {
    ConfigMode.DEVELOPMENT: DevelopmentConfig,
    ConfigMode.PRODUCTION: ProductionConfig,
}


def _create_app_with_config(config: ConfigMode):
    """Create Flask app for the given mode, exiting cleanly on configuration errors."""
    try:
        return create_app(CONFIG_CLASSES[config])
    except MissingSigningSaltError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _signing_salt(flask_app):
    """Return the app's flash signing salt, exiting cleanly when none is configured."""
    try:
        return FlashStore.signing_salt_for(flask_app)
    except MissingSigningSaltError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _print_startup_banner(config_name: str, host: str, port: int, debug: bool = False):
    """Print a startup banner with configuration info."""
    url = f"http://{host}:{port}"

    config_info = f"""[bold blue]flashstore demo[/bold blue]

[green]Configuration:[/green] {config_name}
[green]Host:[/green] {host}
[green]Port:[/green] {port}
[green]Debug Mode:[/green] {'Enabled' if debug else 'Disabled'}
[green]URL:[/green] {url}

[yellow]Available Routes:[/yellow]
• Messages: {url}/
• Profile form: {url}/profile
• Signed cookie handoff: {url}/handoff"""

    console.print(Panel(config_info, box=box.ROUNDED, padding=(1, 2)))


@app.command()
def dev(
    host: str = typer.Option("localhost", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(3000, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(True, "--reload/--no-reload", help="Enable auto-reload on code changes"),
):
    """Run the demo app in development mode."""
    _print_startup_banner("Development", host, port, True)
    flask_app = _create_app_with_config(ConfigMode.DEVELOPMENT)

    console.print("\n[bold green]Starting development server...[/bold green]")
    flask_app.run(host=host, port=port, debug=True, use_reloader=reload)


@app.command()
def serve(
    config: ConfigMode = typer.Option(ConfigMode.DEVELOPMENT, "--config", "-c", help="Configuration mode"),
    host: str = typer.Option("localhost", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(3000, "--port", "-p", help="Port to bind to"),
    debug: Optional[bool] = typer.Option(None, "--debug/--no-debug", help="Enable debug mode (auto-detected if not specified)"),
):
    """Run the demo app with the chosen configuration."""
    debug_mode = debug if debug is not None else config == ConfigMode.DEVELOPMENT
    config_name = config.value.capitalize()

    _print_startup_banner(config_name, host, port, debug_mode)
    flask_app = _create_app_with_config(config)

    console.print(f"\n[bold green]Starting {config.value} server...[/bold green]")
    flask_app.run(host=host, port=port, debug=debug_mode, threaded=True)


@app.command()
def config_check(
    config: ConfigMode = typer.Option(ConfigMode.DEVELOPMENT, "--config", "-c", help="Configuration mode to check")
):
    """Validate configuration and display current settings."""
    console.print(f"\n[bold blue]Configuration Check: {config.value.capitalize()} Mode[/bold blue]")
    flask_app = _create_app_with_config(config)

    table = Table(show_header=True, header_style="bold magenta", box=box.ROUNDED)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    config_items = [
        ("DEBUG", flask_app.config.get('DEBUG')),
        ("SECRET_KEY", "***" if flask_app.config.get('SECRET_KEY') else "Not Set"),
        ("FLASH_SIGNING_SALT", "***" if flask_app.config.get('FLASH_SIGNING_SALT') else "Not Set"),
        ("FLASH_SIGNED_COOKIE", flask_app.config.get('FLASH_SIGNED_COOKIE')),
        ("FLASH_AUTO_FETCH", flask_app.config.get('FLASH_AUTO_FETCH')),
        ("SECURITY_HEADERS_ENABLED", flask_app.config.get('SECURITY_HEADERS_ENABLED')),
        ("CSP_MODE", flask_app.config.get('CSP_MODE')),
    ]
    for setting, value in config_items:
        table.add_row(setting, str(value))
    console.print(table)

    issues = []
    if flask_app.config.get('SECRET_KEY') == 'dev-secret-key-change-in-production':
        if config == ConfigMode.PRODUCTION:
            issues.append("FLASK_SECRET_KEY should be set to a secure value in production")
        else:
            issues.append("Using default FLASK_SECRET_KEY (acceptable for development)")
    if config == ConfigMode.PRODUCTION and flask_app.config.get('DEBUG'):
        issues.append("DEBUG should be disabled in production mode")

    if issues:
        console.print("\n[bold yellow]Configuration Issues:[/bold yellow]")
        for i, issue in enumerate(issues, 1):
            console.print(f"  {i}. [yellow]{issue}[/yellow]")
    else:
        console.print("\n[bold green]✓ Configuration looks good![/bold green]")


@app.command()
def routes():
    """Display all Flask routes and their methods."""
    flask_app = _create_app_with_config(ConfigMode.DEVELOPMENT)

    table = Table(show_header=True, header_style="bold magenta", box=box.ROUNDED)
    table.add_column("Route", style="cyan")
    table.add_column("Methods", style="green")
    table.add_column("Endpoint", style="yellow")

    for rule in flask_app.url_map.iter_rules():
        methods = ', '.join(sorted(m for m in rule.methods if m not in ('HEAD', 'OPTIONS')))
        table.add_row(str(rule.rule), methods, rule.endpoint)

    console.print(table)


@app.command()
def gen_salt(
    length: int = typer.Option(8, "--length", "-l", help="Number of characters in the salt"),
):
    """Generate a random value for FLASH_SIGNING_SALT."""
    console.print(random_signing_salt(length))


@app.command("sign-token")
def sign_token_cmd(
    flash_json: str = typer.Argument(..., help='Flash map as JSON, e.g. \'{"info": "Welcome"}\''),
    config: ConfigMode = typer.Option(ConfigMode.DEVELOPMENT, "--config", "-c", help="Configuration mode"),
):
    """Sign a flash map into a cross-boundary cookie token."""
    try:
        flash = json.loads(flash_json)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON: {e}[/red]")
        raise typer.Exit(1)
    if not isinstance(flash, dict):
        console.print("[red]Flash must be a JSON object[/red]")
        raise typer.Exit(1)

    flask_app = _create_app_with_config(config)
    token = sign_token(flask_app, _signing_salt(flask_app), flash)
    console.print(f"[dim]{COOKIE_NAME} (valid {TOKEN_MAX_AGE}s):[/dim]")
    console.print(token, soft_wrap=True)


@app.command("verify-token")
def verify_token_cmd(
    token: str = typer.Argument(..., help="Token taken from the flash cookie"),
    config: ConfigMode = typer.Option(ConfigMode.DEVELOPMENT, "--config", "-c", help="Configuration mode"),
    max_age: int = typer.Option(TOKEN_MAX_AGE, "--max-age", help="Maximum token age in seconds"),
):
    """Verify a flash cookie token and print its contents."""
    flask_app = _create_app_with_config(config)
    flash = verify_token(flask_app, _signing_salt(flask_app), token, max_age=max_age)
    if flash is None:
        console.print("[red]✗ Token is invalid or expired[/red]")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold magenta", box=box.ROUNDED)
    table.add_column("Key", style="cyan")
    table.add_column("Message", style="white")
    for key, message in flash.items():
        table.add_row(key, str(message))
    console.print(table)


if __name__ == "__main__":
    app()
