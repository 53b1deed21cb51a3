"""Scenario orchestration pipeline."""

from pathlib import Path

import structlog

from dualpush.core.exceptions import (
    CloneFailedError,
    CloneIntegrityError,
    GitCommandError,
    IdentityConfigurationError,
    PushFailedError,
    TargetAlreadyExistsError,
    ValidationError,
)
from dualpush.core.models.scenario import Scenario, ScenarioRequest, ScenarioResult
from dualpush.git.client import GitClient
from dualpush.git.probe import RepositoryProbe
from dualpush.services.path_resolver import PathResolver
from dualpush.services.reconciler import RemoteReconciler

logger = structlog.get_logger(__name__)


class ScenarioPipeline:
    """Runs one scenario end to end.

    Clone scenarios:
    1. Resolve the target path and check it is absent
    2. Clone from the called platform and check the clone landed
    3. Set the local identity (optional)
    4. Reconcile the remote: fetch from the called platform, push to both
    5. Warn when the clone is empty, then push everything (optional)

    The reconcile scenario skips 1-2 and instead requires an existing
    working copy. Every step is terminal on failure.
    """

    def __init__(
        self,
        git: GitClient,
        path_resolver: PathResolver | None = None,
        probe: RepositoryProbe | None = None,
        reconciler: RemoteReconciler | None = None,
    ) -> None:
        self._git = git
        self._paths = path_resolver or PathResolver()
        self._probe = probe or RepositoryProbe(git)
        self._reconciler = reconciler or RemoteReconciler(git, self._probe)

    def run(self, request: ScenarioRequest) -> ScenarioResult:
        if request.dry_run and request.scenario.clones:
            raise ValidationError(
                "Dry run is only available when reconciling an existing working copy",
                details={"scenario": request.scenario.value},
            )

        logger.info(
            "Running scenario",
            scenario=request.scenario.value,
            path=str(request.path),
            primary=request.primary_url,
            secondary=request.secondary_url,
        )

        if request.scenario.clones:
            target_dir = self._clone(request)
        else:
            target_dir = self._existing_working_copy(request.path)

        warnings: list[str] = []

        if request.wants_identity and not request.dry_run:
            self._configure_identity(target_dir, request)

        plan, final_remote = self._reconciler.reconcile(
            target_dir,
            primary_url=request.primary_url,
            secondary_url=request.secondary_url,
            remote_name=request.remote_name,
            dry_run=request.dry_run,
        )

        has_commits = self._probe.has_commits(target_dir)
        if request.scenario.clones and not has_commits:
            warnings.append("Cloned repository is empty; commit something before pushing")

        synchronized = False
        if request.synchronize_now and not request.dry_run:
            if has_commits:
                self._synchronize(target_dir, request.remote_name)
                synchronized = True
            else:
                warnings.append("Nothing to push: no commits yet, skipped synchronizing")

        for warning in warnings:
            logger.info("Scenario warning", warning=warning, path=str(target_dir))

        return ScenarioResult(
            scenario=request.scenario,
            target_dir=target_dir,
            plan=plan,
            final_remote=final_remote,
            synchronized=synchronized,
            dry_run=request.dry_run,
            warnings=warnings,
        )

    def _clone(self, request: ScenarioRequest) -> Path:
        clone_url = request.primary_url
        resolved = self._paths.resolve(request.path, clone_url)
        target_dir = resolved.target_dir

        if target_dir.exists():
            raise TargetAlreadyExistsError(
                f"Target directory already exists: {target_dir}",
                details={"path": str(target_dir)},
            )

        logger.info("Cloning repository", url=clone_url, target=str(target_dir), mode=resolved.mode.value)
        try:
            self._git.clone(clone_url, target_dir, remote_name=request.remote_name)
        except GitCommandError as e:
            raise CloneFailedError(
                f"Failed to clone {clone_url}: {e.stderr or e.message}",
                step="clone",
                stderr=e.stderr,
                details={"url": clone_url, "path": str(target_dir)},
            ) from e

        if not target_dir.is_dir():
            listing = sorted(p.name for p in resolved.parent_dir.iterdir())
            raise CloneIntegrityError(
                f"Clone reported success but {target_dir} is missing",
                details={"path": str(target_dir), "parent_listing": listing},
            )
        return target_dir

    def _existing_working_copy(self, path: Path) -> Path:
        target_dir = Path(path).expanduser().absolute()
        self._probe.verify(target_dir)
        return target_dir

    def _configure_identity(self, target_dir: Path, request: ScenarioRequest) -> None:
        try:
            self._git.set_identity(target_dir, email=request.identity_email, name=request.identity_name)
        except GitCommandError as e:
            raise IdentityConfigurationError(
                f"Failed to set local identity: {e.stderr or e.message}",
                details={"path": str(target_dir)},
            ) from e
        logger.info("Local identity set", email=request.identity_email, name=request.identity_name)

    def _synchronize(self, target_dir: Path, remote_name: str) -> None:
        for step, push in (
            ("branches", self._git.push_all_branches),
            ("tags", self._git.push_all_tags),
        ):
            logger.info("Pushing", remote=remote_name, refs=step)
            try:
                push(target_dir, remote_name)
            except GitCommandError as e:
                raise PushFailedError(
                    f"Failed to push {step} to {remote_name}: {e.stderr or e.message}",
                    details={"step": step, "remote": remote_name, "stderr": e.stderr},
                ) from e
