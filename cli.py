"""CLI commands for Official ID event operators."""

import asyncio
from datetime import timedelta
from uuid import UUID

import typer

from src.auth.dependencies import SqlUserReadModel
from src.auth.dtos import CurrentUser
from src.auth.tokens import create_access_token
from src.email_service import get_notification_dispatcher
from src.events.dtos import BatchResultDTO
from src.events.errors import WorkflowError
from src.events.features.approve.write_model import SqlApproveWriteModel
from src.events.features.cancel_registration.write_model import SqlCancelRegistrationWriteModel
from src.events.ticket_numbers import generate_ticket_number

app = typer.Typer(help="CLI commands for Official ID event operators")


async def _get_operator(email: str) -> CurrentUser:
    operator = await SqlUserReadModel().get_active_user_by_email(email)
    if operator is None:
        raise ValueError(f"No active user with email {email}")
    return operator


async def _approve(operator_email: str, registration_ids: list[UUID]) -> BatchResultDTO:
    operator = await _get_operator(operator_email)
    write_model = SqlApproveWriteModel(dispatcher=get_notification_dispatcher())
    return await write_model.approve(registration_ids, operator)


async def _cancel(operator_email: str, registration_ids: list[UUID]) -> BatchResultDTO:
    operator = await _get_operator(operator_email)
    return await SqlCancelRegistrationWriteModel().cancel(registration_ids, operator)


def _print_result(result: BatchResultDTO, verb: str):
    typer.secho(f"{verb}: {result.processed}", fg=typer.colors.GREEN)
    for registration_id in result.processed_ids:
        typer.secho(f"  - {registration_id}", fg=typer.colors.BLUE)
    if result.failed_ids:
        typer.secho(f"Failed: {result.failed}", fg=typer.colors.RED)
        for registration_id in result.failed_ids:
            typer.secho(f"  - {registration_id}", fg=typer.colors.RED)
    if result.skipped_ids:
        typer.secho(f"Skipped: {len(result.skipped_ids)}", fg=typer.colors.YELLOW)


def _parse_ids(values: list[str]) -> list[UUID]:
    try:
        return [UUID(value) for value in values]
    except ValueError as e:
        typer.secho(f"Invalid registration id: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)


@app.command()
def approve(
    registration_ids: list[str] = typer.Argument(..., help="Registration UUIDs to approve"),
    operator_email: str = typer.Option(
        ...,
        "--operator",
        "-o",
        help="Email of the operator performing the approval",
    ),
):
    """Approve pending registrations, issue tickets and send approval emails."""
    ids = _parse_ids(registration_ids)
    try:
        result = asyncio.run(_approve(operator_email, ids))
    except (ValueError, WorkflowError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    _print_result(result, "Approved")


@app.command()
def cancel(
    registration_ids: list[str] = typer.Argument(..., help="Registration UUIDs to cancel"),
    operator_email: str = typer.Option(
        ...,
        "--operator",
        "-o",
        help="Email of the operator performing the cancellation",
    ),
):
    """Cancel pending or confirmed registrations."""
    ids = _parse_ids(registration_ids)
    try:
        result = asyncio.run(_cancel(operator_email, ids))
    except (ValueError, WorkflowError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    _print_result(result, "Cancelled")


@app.command()
def ticket_number(
    event_title: str = typer.Argument(..., help="Event title"),
    seq_num: int = typer.Argument(..., help="Ticket sequence within the event, starting at 1"),
    event_date: str = typer.Argument(..., help="Event date as YYYY-MM-DD"),
):
    """Preview the ticket number an approval would issue."""
    try:
        number = generate_ticket_number(event_title, seq_num, event_date)
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho(number, fg=typer.colors.CYAN)


@app.command()
def create_token(
    email: str = typer.Argument(..., help="Email of the user the token is issued for"),
    minutes: int = typer.Option(None, "--minutes", "-m", help="Token lifetime in minutes"),
):
    """Issue a bearer token for an existing operator."""
    try:
        operator = asyncio.run(_get_operator(email))
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    expires = timedelta(minutes=minutes) if minutes else None
    typer.secho(f"Token for {operator.email}:", fg=typer.colors.GREEN)
    typer.echo(create_access_token(operator.email, expires_delta=expires))


if __name__ == "__main__":
    app()
