"""Command-line client for the file store server.

Usage:
    filestore [--server URL] add FILE...
    filestore ls
    filestore rm FILE
    filestore update FILE
    filestore wc
    filestore freq-words [--limit/-n 10] [--order asc|dsc]
"""

import os
from typing import List

import httpx
import typer
from rich.console import Console

from app.core import config

app = typer.Typer(
    name="filestore",
    help="Client for the remote file store",
    no_args_is_help=True,
)
console = Console(highlight=False, soft_wrap=True)

state = {"server": config.FILESTORE_SERVER}


def get_client(server: str) -> httpx.Client:
    return httpx.Client(base_url=server.rstrip("/"), timeout=30.0)


def _describe(response: httpx.Response) -> str:
    status = f"{response.status_code} {response.reason_phrase}"
    message = response.text.strip()
    return f"{status} ({message})" if message else status


def _read_local(file: str) -> bytes:
    with open(file, "rb") as f:
        return f.read()


@app.callback()
def main(
    server: str = typer.Option(config.FILESTORE_SERVER, "--server", help="Server address"),
) -> None:
    state["server"] = server


@app.command("add")
def add_files(files: List[str] = typer.Argument(..., help="Local files to upload")) -> None:
    """Upload new files; existing names on the server are rejected."""
    failed = False
    with get_client(state["server"]) as client:
        for file in files:
            if not os.path.isfile(file):
                console.print(f"File '{file}' not found", markup=False)
                failed = True
                continue

            try:
                content = _read_local(file)
            except OSError as e:
                console.print(f"Error reading file '{file}': {e}", markup=False)
                failed = True
                continue

            try:
                response = client.post(f"/add/{file}", content=content, headers={"Content-Type": "text/plain"})
            except httpx.HTTPError as e:
                console.print(f"Error sending file '{file}' to server: {e}", markup=False)
                failed = True
                continue

            if response.status_code == httpx.codes.OK:
                console.print(f"File '{file}' added successfully", markup=False)
            else:
                console.print(f"Failed to add file '{file}'. Server returned: {_describe(response)}", markup=False)
                failed = True

    if failed:
        raise typer.Exit(code=1)


@app.command("ls")
def list_files() -> None:
    """List files stored on the server."""
    body = _get("/ls", "list files")
    typer.echo(body)


@app.command("rm")
def remove_file(file: str) -> None:
    """Remove a file from the server."""
    with get_client(state["server"]) as client:
        try:
            response = client.get(f"/rm/{file}")
        except httpx.HTTPError as e:
            console.print(f"Error removing file '{file}': {e}", markup=False)
            raise typer.Exit(code=1)

    if response.status_code != httpx.codes.OK:
        console.print(f"Failed to remove file '{file}'. Server returned: {_describe(response)}", markup=False)
        raise typer.Exit(code=1)
    console.print(f"File '{file}' removed successfully", markup=False)


@app.command("update")
def update_file(file: str) -> None:
    """Create or overwrite a file on the server with local content."""
    if not os.path.isfile(file):
        console.print(f"File '{file}' not found", markup=False)
        raise typer.Exit(code=1)

    try:
        content = _read_local(file)
    except OSError as e:
        console.print(f"Error reading file '{file}': {e}", markup=False)
        raise typer.Exit(code=1)

    with get_client(state["server"]) as client:
        try:
            response = client.post(f"/update/{file}", content=content, headers={"Content-Type": "text/plain"})
        except httpx.HTTPError as e:
            console.print(f"Error sending file '{file}' to server: {e}", markup=False)
            raise typer.Exit(code=1)

    if response.status_code != httpx.codes.OK:
        console.print(f"Failed to update file '{file}'. Server returned: {_describe(response)}", markup=False)
        raise typer.Exit(code=1)
    console.print(f"File '{file}' updated successfully", markup=False)


@app.command("wc")
def word_count() -> None:
    """Total number of words across all stored files."""
    body = _get("/wc", "get word count")
    console.print(f"Total number of words: {body}", markup=False)


@app.command("freq-words")
def freq_words(
    limit: int = typer.Option(10, "--limit", "-n", help="Number of words to show"),
    order: str = typer.Option("asc", "--order", help="asc or dsc"),
) -> None:
    """Most (or least) frequent words across all stored files."""
    body = _get("/freq-words", "get frequent words", params={"limit": limit, "order": order})
    typer.echo(body.rstrip("\n"))


def _get(path: str, action: str, params=None) -> str:
    with get_client(state["server"]) as client:
        try:
            response = client.get(path, params=params)
        except httpx.HTTPError as e:
            console.print(f"Error trying to {action}: {e}", markup=False)
            raise typer.Exit(code=1)

    if response.status_code != httpx.codes.OK:
        console.print(f"Failed to {action}. Server returned: {_describe(response)}", markup=False)
        raise typer.Exit(code=1)
    return response.text


def cli() -> None:
    """Entry point for the client."""
    app()


if __name__ == "__main__":
    cli()
