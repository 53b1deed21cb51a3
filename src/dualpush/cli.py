"""CLI for dualpush."""

import sys
from pathlib import Path
from typing import NoReturn

import click
import structlog

from dualpush.config.logging import configure_logging
from dualpush.config.settings import get_settings
from dualpush.core.exceptions import CloneIntegrityError, DualPushError
from dualpush.core.models.plan import ReconciliationPlan
from dualpush.core.models.remote import RemoteSpec
from dualpush.core.models.scenario import PlatformChoice, Scenario, ScenarioRequest, ScenarioResult

logger = structlog.get_logger(__name__)


def _create_git():
    """Create the git client; fails when git is not installed."""
    from dualpush.git.client import GitClient

    return GitClient(get_settings().git_executable)


def _create_pipeline():
    """Create the scenario pipeline."""
    from dualpush.pipelines.scenario import ScenarioPipeline

    return ScenarioPipeline(_create_git())


def _fail(error: DualPushError) -> NoReturn:
    click.echo(f"Error: {error.message}", err=True)
    if isinstance(error, CloneIntegrityError):
        listing = error.details.get("parent_listing", [])
        click.echo(f"  Parent directory contains: {', '.join(listing) or '(nothing)'}", err=True)
    sys.exit(1)


def _echo_remote(remote: RemoteSpec | None) -> None:
    if remote is None:
        click.echo("  (no such remote)")
        return
    click.echo(f"  {remote.name}  fetch: {remote.fetch_url}")
    for url in remote.push_urls:
        click.echo(f"  {remote.name}  push:  {url}")


def _echo_plan(plan: ReconciliationPlan) -> None:
    if plan.is_empty:
        click.echo("Remote already mirrored, nothing to change.")
        return
    for i, op in enumerate(plan.operations, 1):
        click.echo(f"  {i}. {op.describe()}")


def _report(result: ScenarioResult) -> None:
    click.echo(f"Working copy: {result.target_dir}")
    if result.dry_run:
        click.echo("Planned changes (dry run):")
    else:
        click.echo("Applied changes:")
    _echo_plan(result.plan)
    if not result.dry_run:
        click.echo("Remote:")
        _echo_remote(result.final_remote)
    for warning in result.warnings:
        click.echo(f"Warning: {warning}", err=True)
    if result.synchronized:
        click.echo(f"Pushed all branches and tags to {result.plan.remote}")


def _run(request: ScenarioRequest) -> None:
    try:
        result = _create_pipeline().run(request)
    except DualPushError as e:
        logger.debug("Scenario failed", error=e.message, details=e.details)
        _fail(e)
    _report(result)


def _scenario_options(func):
    """Options shared by every scenario command."""
    options = [
        click.option("--a", "url_a", required=True, help="Repository URL on platform A"),
        click.option("--b", "url_b", required=True, help="Repository URL on platform B"),
        click.option("--email", default=lambda: get_settings().identity_email, help="Local user.email to set"),
        click.option("--name", default=lambda: get_settings().identity_name, help="Local user.name to set"),
        click.option(
            "--sync/--no-sync",
            "synchronize_now",
            default=False,
            help="Push all branches and tags right after configuring",
        ),
        click.option(
            "--remote",
            "remote_name",
            default=lambda: get_settings().remote_name,
            help="Remote name (default: origin)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """dualpush: fetch from one hosting platform, push to two."""
    log_level = "DEBUG" if verbose else get_settings().log_level
    configure_logging(log_level=log_level)


@cli.command("clone-primary")
@click.argument("path")
@_scenario_options
def clone_primary(
    path: str,
    url_a: str,
    url_b: str,
    email: str | None,
    name: str | None,
    synchronize_now: bool,
    remote_name: str,
) -> None:
    """Clone from platform A and push to both A and B.

    PATH is the target directory if it does not exist, or the directory
    to clone into if it does.
    """
    _run(
        ScenarioRequest(
            scenario=Scenario.CLONE_PRIMARY,
            path=Path(path),
            platform_a_url=url_a,
            platform_b_url=url_b,
            identity_email=email,
            identity_name=name,
            synchronize_now=synchronize_now,
            remote_name=remote_name,
        )
    )


@cli.command("clone-secondary")
@click.argument("path")
@_scenario_options
def clone_secondary(
    path: str,
    url_a: str,
    url_b: str,
    email: str | None,
    name: str | None,
    synchronize_now: bool,
    remote_name: str,
) -> None:
    """Clone from platform B and push to both B and A.

    PATH is interpreted as for clone-primary.
    """
    _run(
        ScenarioRequest(
            scenario=Scenario.CLONE_SECONDARY,
            path=Path(path),
            platform_a_url=url_a,
            platform_b_url=url_b,
            identity_email=email,
            identity_name=name,
            synchronize_now=synchronize_now,
            remote_name=remote_name,
        )
    )


@cli.command()
@click.argument("path", default=".")
@_scenario_options
@click.option(
    "--primary",
    type=click.Choice([c.value for c in PlatformChoice]),
    default=PlatformChoice.A.value,
    show_default=True,
    help="Platform to fetch from",
)
@click.option("--dry-run", is_flag=True, help="Show the planned changes without applying them")
def reconcile(
    path: str,
    url_a: str,
    url_b: str,
    email: str | None,
    name: str | None,
    synchronize_now: bool,
    remote_name: str,
    primary: str,
    dry_run: bool,
) -> None:
    """Configure an existing working copy to push to both platforms."""
    _run(
        ScenarioRequest(
            scenario=Scenario.RECONCILE,
            path=Path(path),
            platform_a_url=url_a,
            platform_b_url=url_b,
            primary_choice=PlatformChoice(primary),
            identity_email=email,
            identity_name=name,
            synchronize_now=synchronize_now,
            remote_name=remote_name,
            dry_run=dry_run,
        )
    )


@cli.command()
@click.argument("path", default=".")
@click.option("--a", "url_a", help="Platform A URL to compare against")
@click.option("--b", "url_b", help="Platform B URL to compare against")
@click.option("--remote", "remote_name", default=None, help="Remote name")
def status(path: str, url_a: str | None, url_b: str | None, remote_name: str | None) -> None:
    """Show the remote topology of a working copy."""
    from dualpush.git.probe import RepositoryProbe
    from dualpush.services.reconciler import RemoteReconciler

    if bool(url_a) != bool(url_b):
        raise click.UsageError("--a and --b must be given together")

    remote_name = remote_name or get_settings().remote_name
    try:
        git = _create_git()
        probe = RepositoryProbe(git)
        state = probe.probe(Path(path).expanduser().absolute())
        click.echo("dualpush status")
        click.echo(f"  Working copy: {state.path}")
        click.echo(f"  Commits:      {'yes' if state.has_commits else 'none'}")
        click.echo("Remote:")
        _echo_remote(state.remote(remote_name))

        if url_a and url_b:
            reconciler = RemoteReconciler(git, probe)
            plan = reconciler.plan(state.remote(remote_name), url_a, url_b, remote_name)
            if plan.is_empty:
                click.echo("Mirrored: yes")
            else:
                click.echo("Mirrored: no, reconcile would:")
                _echo_plan(plan)
    except DualPushError as e:
        _fail(e)


if __name__ == "__main__":
    cli()
