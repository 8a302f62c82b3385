from sitecheck.build.orchestrator import (
    BuildStep,
    BuildOrchestrator,
    full_build_steps,
    production_build_steps,
)
