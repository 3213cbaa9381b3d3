"""Command-line interface for ocs_client."""

from __future__ import annotations

import logging
import sys

import click
from dotenv import load_dotenv

from ocs_client import OcsClient, OcsError, Permission, PublicShare, ResourceInfo

# Load OCS_URL, OCS_USER and OCS_PASSWORD from a .env file
load_dotenv()


def get_client(url: str | None, user: str | None, password: str | None) -> OcsClient:
    """Create an OcsClient, prompting for whatever is missing."""
    if not url:
        url = click.prompt("Server URL")
    if not user:
        user = click.prompt("User")
    if not password:
        password = click.prompt("Password", hide_input=True)
    return OcsClient(url, user, password)  # type: ignore[arg-type]


def _fail(message: str) -> None:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="ocs-client")
@click.option("--url", envvar="OCS_URL", help="Server base URL")
@click.option("--user", "-u", envvar="OCS_USER", help="User name")
@click.option("--password", "-p", envvar="OCS_PASSWORD", help="Password or app password")
@click.option("--verbose", "-v", is_flag=True, help="Log requests")
@click.pass_context
def main(
    ctx: click.Context,
    url: str | None,
    user: str | None,
    password: str | None,
    verbose: bool,
) -> None:
    """OwnCloud/Nextcloud CLI - Browse files, shares and users."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    ctx.obj = {"url": url, "user": user, "password": password}


def _client(ctx: click.Context) -> OcsClient:
    return get_client(ctx.obj["url"], ctx.obj["user"], ctx.obj["password"])


@main.command("ls")
@click.argument("path", default="/")
@click.pass_context
def list_directory(ctx: click.Context, path: str) -> None:
    """List contents of a remote directory.

    PATH: Directory path to list (default: /)

    Examples:

        ocs ls

        ocs ls /Documents
    """
    try:
        client = _client(ctx)
        try:
            items = client.list(path)
        finally:
            client.close()
    except OcsError as e:
        _fail(str(e))
        return

    if not items:
        click.echo(f"(empty directory: {path})")
    for item in items:
        if item.is_directory:
            click.echo(click.style(f"  {item.item_name}/", fg="blue"))
        else:
            click.echo(f"  {item.item_name}  ({_format_size(item.size or 0)})")


@main.command()
@click.argument("path")
@click.pass_context
def info(ctx: click.Context, path: str) -> None:
    """Show metadata of a remote file or directory."""
    try:
        client = _client(ctx)
        try:
            resource = client.get_resource_info(path)
        finally:
            client.close()
    except OcsError as e:
        _fail(str(e))
        return

    if resource is None:
        _fail(f"Not found: {path}")
        return
    _echo_resource(resource)


def _echo_resource(resource: ResourceInfo) -> None:
    click.echo(f"Path:          {resource.full_path}")
    click.echo(f"Content type:  {resource.content_type}")
    if resource.size is not None:
        click.echo(f"Size:          {_format_size(resource.size)}")
    click.echo(f"ETag:          {resource.etag}")
    click.echo(f"Last modified: {resource.last_modified}")


@main.command()
@click.argument("path", default="")
@click.pass_context
def shares(ctx: click.Context, path: str) -> None:
    """List shares, of PATH or of everything visible to the user."""
    try:
        client = _client(ctx)
        try:
            items = client.get_shares(path)
        finally:
            client.close()
    except OcsError as e:
        _fail(str(e))
        return

    if not items:
        click.echo("(no shares)")
    for share in items:
        line = f"  {share}"
        if isinstance(share, PublicShare) and share.url:
            line += f"  {share.url}"
        click.echo(line)


@main.command("share-link")
@click.argument("path")
@click.option("--password", "link_password", default=None, help="Protect the link with a password")
@click.option("--name", default=None, help="Display name of the link")
@click.option("--writable", is_flag=True, help="Allow uploads into a shared folder")
@click.pass_context
def share_link(
    ctx: click.Context,
    path: str,
    link_password: str | None,
    name: str | None,
    writable: bool,
) -> None:
    """Create a public link for PATH.

    Examples:

        ocs share-link /Documents/report.pdf

        ocs share-link /Inbox --writable --password secret
    """
    permissions = Permission.ALL if writable else Permission.READ
    try:
        client = _client(ctx)
        try:
            share = client.create_share_with_link(
                path,
                permissions,
                public_upload=True if writable else None,
                name=name,
                password=link_password,
            )
        finally:
            client.close()
    except OcsError as e:
        _fail(str(e))
        return

    click.echo(click.style(f"Created share {share.share_id}: ", fg="green") + f"{share.url}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show server configuration."""
    try:
        client = _client(ctx)
        try:
            cfg = client.get_config()
        finally:
            client.close()
    except OcsError as e:
        _fail(str(e))
        return

    click.echo(f"Website: {cfg.website}")
    click.echo(f"Host:    {cfg.host}")
    click.echo(f"SSL:     {cfg.ssl}")
    click.echo(f"Version: {cfg.version}")
    click.echo(f"Contact: {cfg.contact}")


@main.command()
@click.argument("search", default="")
@click.pass_context
def users(ctx: click.Context, search: str) -> None:
    """List user ids, optionally matching SEARCH."""
    try:
        client = _client(ctx)
        try:
            names = client.search_users(search or None)
        finally:
            client.close()
    except OcsError as e:
        _fail(str(e))
        return

    for name in names:
        click.echo(name)


@main.command()
@click.argument("search", default="")
@click.pass_context
def groups(ctx: click.Context, search: str) -> None:
    """List group ids, optionally matching SEARCH."""
    try:
        client = _client(ctx)
        try:
            names = client.search_groups(search or None)
        finally:
            client.close()
    except OcsError as e:
        _fail(str(e))
        return

    for name in names:
        click.echo(name)


def _format_size(size_bytes: int) -> str:
    """Format file size in human-readable form."""
    for unit in ["B", "KB", "MB", "GB"]:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}" if unit != "B" else f"{size_bytes} {unit}"
        size_bytes /= 1024  # type: ignore[assignment]
    return f"{size_bytes:.1f} TB"


if __name__ == "__main__":
    main()
