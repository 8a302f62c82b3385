import logging
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from sitecheck.config import Settings
from sitecheck.errors import BuildError
from sitecheck.logger import setup_logger

logger = setup_logger("sitecheck.build")
build_log = logging.LoggerAdapter(logger, {"context": "build"})


@dataclass(frozen=True)
class BuildStep:
    """One blocking invocation of the external site tooling."""
    name: str
    command: List[str]
    env: Dict[str, str] = field(default_factory=dict)
    quiet: bool = False       # Discard output instead of streaming it


class BuildOrchestrator:
    """
    Runs build steps one after another.
    Invariants:
    - Sequential: a step starts only after the previous one exited.
    - Fail fast: the first failing step aborts the run, nothing is retried.
    - No timeout: a hung build hangs the verifier.
    """

    def __init__(self, steps: List[BuildStep], cwd: Optional[Path] = None):
        self.steps = list(steps)
        self.cwd = cwd

    def run(self):
        for step in self.steps:
            self._run_step(step)

    def _run_step(self, step: BuildStep):
        env = os.environ.copy()
        env.update(step.env)
        output = subprocess.DEVNULL if step.quiet else None

        build_log.info(f"   Running: {' '.join(step.command)}")
        try:
            subprocess.run(
                step.command,
                cwd=self.cwd,
                env=env,
                stdout=output,
                stderr=output,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise BuildError(step.name, str(e), returncode=e.returncode) from e
        except OSError as e:
            # Executable missing or not runnable
            raise BuildError(step.name, str(e)) from e


def production_build_steps(settings: Settings) -> List[BuildStep]:
    return [
        BuildStep(
            name="production",
            command=settings.split_command(settings.prod_build_command),
        ),
    ]


def full_build_steps(settings: Settings) -> List[BuildStep]:
    """CSS build, then the dev (serve mode) build, then the production build."""
    return [
        BuildStep(
            name="css",
            command=settings.split_command(settings.css_build_command),
            quiet=True,
        ),
        BuildStep(
            name="development",
            command=settings.split_command(settings.dev_build_command),
            env=dict(settings.dev_build_env),
        ),
    ] + production_build_steps(settings)
