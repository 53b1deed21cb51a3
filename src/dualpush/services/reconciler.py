"""Remote-topology reconciliation."""

from pathlib import Path

import structlog

from dualpush.core.exceptions import GitCommandError, RemoteOperationFailedError
from dualpush.core.models.plan import OperationKind, ReconciliationPlan, RemoteOperation
from dualpush.core.models.remote import RemoteSpec
from dualpush.git.client import GitClient
from dualpush.git.probe import RepositoryProbe

logger = structlog.get_logger(__name__)


class RemoteReconciler:
    """Brings a remote to {fetch: primary, push: primary + secondary}.

    Plans are strictly additive: a push URL that is neither the primary
    nor the secondary is never removed. Planning against a remote that is
    already mirrored yields an empty plan.
    """

    def __init__(self, git: GitClient, probe: RepositoryProbe | None = None) -> None:
        self._git = git
        self._probe = probe or RepositoryProbe(git)

    def plan(
        self,
        current: RemoteSpec | None,
        primary_url: str,
        secondary_url: str,
        remote_name: str = "origin",
    ) -> ReconciliationPlan:
        """Diff the current remote against the desired topology."""
        plan = ReconciliationPlan(
            remote=remote_name,
            primary_url=primary_url,
            secondary_url=secondary_url,
        )

        if current is None:
            plan.operations.append(
                RemoteOperation(
                    kind=OperationKind.CREATE_REMOTE,
                    remote=remote_name,
                    url=primary_url,
                )
            )
            push_after = [primary_url]
            explicit_push = False
        else:
            explicit_push = current.explicit_push
            push_after = list(current.push_urls)
            if current.fetch_url != primary_url:
                plan.operations.append(
                    RemoteOperation(
                        kind=OperationKind.SET_FETCH_URL,
                        remote=remote_name,
                        url=primary_url,
                        previous_url=current.fetch_url,
                    )
                )
                if not explicit_push:
                    # Without pushurl entries every `url` entry is pushed to; the
                    # fetch entry is replaced and other copies of primary dropped
                    push_after = [primary_url] + [
                        url for url in push_after[1:] if url != primary_url
                    ]
            else:
                plan.notices.append(f"{remote_name} already fetches from {primary_url}")

        for url in (primary_url, secondary_url):
            if url in push_after:
                plan.notices.append(f"{url} already configured as a push URL")
                continue
            plan.operations.append(
                RemoteOperation(
                    kind=OperationKind.ADD_PUSH_URL,
                    remote=remote_name,
                    url=url,
                    push_only=explicit_push,
                )
            )
            push_after.append(url)

        return plan

    def apply(self, path: Path, plan: ReconciliationPlan) -> None:
        """Run the plan in order, aborting on the first failure.

        Operations already applied are left in place; re-running
        reconciliation picks up from there.
        """
        for index, op in enumerate(plan.operations, start=1):
            step = op.describe()
            logger.info("Applying remote operation", step=step, index=index)
            try:
                if op.kind == OperationKind.CREATE_REMOTE:
                    self._git.add_remote(path, op.remote, op.url)
                elif op.kind == OperationKind.SET_FETCH_URL:
                    self._git.set_fetch_url(path, op.remote, op.url)
                else:
                    self._git.add_push_url(path, op.remote, op.url, push_only=op.push_only)
            except GitCommandError as e:
                raise RemoteOperationFailedError(
                    f"Failed to {step}: {e.stderr or e.message}",
                    step=op.kind.value,
                    stderr=e.stderr,
                    details={"remote": op.remote, "url": op.url, "index": index},
                ) from e

        for notice in plan.notices:
            logger.info("Already configured", notice=notice)

    def reconcile(
        self,
        path: Path,
        primary_url: str,
        secondary_url: str,
        remote_name: str = "origin",
        dry_run: bool = False,
    ) -> tuple[ReconciliationPlan, RemoteSpec | None]:
        """Probe, plan and apply. Returns the plan and the final remote."""
        current = self._probe.remote(path, remote_name)
        plan = self.plan(current, primary_url, secondary_url, remote_name)
        logger.info(
            "Reconciliation planned",
            remote=remote_name,
            operations=[op.kind.value for op in plan.operations],
            dry_run=dry_run,
        )
        if dry_run:
            return plan, current

        self.apply(path, plan)
        return plan, self._probe.remote(path, remote_name)
